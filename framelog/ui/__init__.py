"""
Rendering components for framelog.

Modules:
    - views: UiContext protocol, WindowSpec and the LogView drawing routine
    - system: LogSystem, the scheduler-driven variant of the log window
    - curses_ui: UiContext implementation for terminals
    - loop: FrameLoop, a curses frame loop that runs systems every frame

Architecture:
    Both integration styles share LogView.build(). handle.draw() calls it
    with a window chosen by the application; LogSystem.run() calls it with
    the window the system owns.
"""
