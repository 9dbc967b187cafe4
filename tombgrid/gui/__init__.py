"""Widget toolkit: constraints, widgets, containers, labels, icons, buttons, stack panels, menus and the GUI root."""