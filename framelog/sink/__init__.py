"""
Record ingestion and buffering for framelog.

Modules:
    - model: Level, Color, Record and Entry value types
    - formatter: Template rendering of a record into one line of text
    - colors: Per-level color palette
    - buffer: Bounded, thread-safe history shared with the renderer
    - handler: The logging.Handler that ties the above together

Architecture:
    Application threads log through the stdlib logging module. The
    BufferHandler formats each record and appends it to the LogBuffer.
    Once per frame the renderer takes a snapshot of the buffer and draws it.
"""
