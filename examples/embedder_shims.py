from __future__ import annotations

from deprecate_notice import deprecate
from deprecate_notice.emitter import EventEmitter


class BrowserWindow(EventEmitter):
    def __init__(self) -> None:
        super().__init__()
        self._title = "untitled"

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value

    def set_bounds(self, width: int, height: int) -> tuple[int, int]:
        return width, height


def set_size(window: BrowserWindow, width: int, height: int) -> tuple[int, int]:
    return window.set_bounds(width, height)


BrowserWindow.set_size = deprecate.rename_function(set_size, "set_bounds")


def main() -> None:
    deprecate.set_handler(lambda message: print(f"[deprecation] {message}"))

    window = BrowserWindow()
    deprecate.event(window, "resize", "resized")
    window.on("resize", lambda width, height: print(f"legacy resize {width}x{height}"))

    print(window.set_size(800, 600))
    print(window.set_size(1024, 768))
    window.emit("resized", 1024, 768)

    deprecate.remove_property(window, "title")
    window.title = "main"
    print(window.title)

    deprecate.set_handler(None)


if __name__ == "__main__":
    main()
