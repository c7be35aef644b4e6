"""PyQt6 front-end: board rendering, input handling, dialogs."""
