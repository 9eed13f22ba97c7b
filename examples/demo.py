"""Example usage of quill styles and the print pipeline.

Walks through leveled logging, styled output, inline open/close,
chained styles, locked segments and structlog routing.
"""

from quill import BOLD, UNDERLINE, LockedStream, Quill, QuillConfig, TimeMode, colors
from quill.logging import configure_logging, get_logger
from quill.style import close, lock, open_styles, render


def main() -> None:
    """Demonstrate the pipeline end to end."""
    q = Quill(QuillConfig(show_thread=True, time_mode=TimeMode.ABSOLUTE))

    # Basic logging
    q.info("Starting application...")
    q.log("Loading modules...")
    q.warn("Deprecated configuration detected.")
    q.error("Failed to load optional plugin!")
    q.success("Modules loaded successfully!")

    # Styled output
    q.println("Custom styled message", BOLD + colors.PURPLE)
    q.println("Background + foreground", colors.BG_WHITE + colors.BLACK + UNDERLINE)

    # Inline open/close
    out = LockedStream(q.sink)
    out.print(open_styles(colors.GREEN, BOLD))
    out.print("Partial styled text ")
    out.println(close() + "Normal text")

    # Chained styles
    q.println("All styles demo", BOLD.and_(colors.RED).and_(UNDERLINE))

    # Lock + apply
    locked = lock("DO NOT MODIFY")
    q.println(render(f"Message with {locked} inside", colors.AMBER))

    # structlog events share the pipeline's prefixes and threshold
    configure_logging(q)
    get_logger().info("Routed through structlog", modules=12, healthy=True)

    q.info("Application finished!")


if __name__ == "__main__":
    main()
