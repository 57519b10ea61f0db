import logging
from typing import Union

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a console handler to the `ddog` logger tree.

    Calling it again only updates the level.
    """
    root = logging.getLogger("ddog")
    root.setLevel(level)

    handler = getattr(root, "_ddog_handler", None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root._ddog_handler = handler  # type: ignore[attr-defined]
    handler.setLevel(level)
    return root
