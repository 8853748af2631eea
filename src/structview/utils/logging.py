"""Logger factory shared by every structview component."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str, verbose: bool = False) -> logging.Logger:
    """
    Return a named logger configured for structview output.

    Parameters
    ----------
    name : str
        Logger name, conventionally ``f"{__name__}.{self.__class__.__name__}"``.
    verbose : bool, optional
        If True, emit DEBUG messages; otherwise only INFO and above.

    Returns
    -------
    logging.Logger
        Logger with a single stream handler attached.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
