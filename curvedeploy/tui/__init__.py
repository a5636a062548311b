"""Terminal tables, colours, confirmation prompts and listings."""