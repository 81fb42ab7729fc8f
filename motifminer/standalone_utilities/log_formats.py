"""Custom logger for motif mining runs."""
import logging
import re


class CustomFormatter(logging.Formatter):
    """A colorizing formatter, one format per level."""
    green = '\u001b[32m'
    bold_green = '\u001b[32;1m'
    magenta = '\u001b[35m'
    bold_yellow = '\u001b[33;1m'
    bold_red = '\u001b[31;1m'
    blue = '\u001b[34m'
    cyan = '\u001b[0;36m'
    div = '\u2503'
    reset = '\u001b[0m'

    prefix = blue + '%(asctime)s ' + reset + magenta
    location = blue + '%(lineno)3d' + reset + ' ' + magenta + '%(name)-40s' + reset
    suffix = cyan + div + reset + ' %(message)s'

    FORMATS = {
        logging.DEBUG: prefix + '[ ' + reset + '%(levelname)s' + magenta + ' ] ' + location + suffix,
        logging.INFO: prefix + '[ ' + reset + bold_green + '%(levelname)s' + reset + magenta + '  ] ' + '%(name)-44s' + reset + suffix,
        logging.WARNING: prefix + '[' + reset + bold_yellow + '%(levelname)s' + reset + magenta + '] ' + location + suffix,
        logging.ERROR: prefix + '[ ' + reset + bold_red + '%(levelname)s' + reset + magenta + ' ] ' + location + suffix,
        logging.CRITICAL: prefix + '[' + reset + bold_red + '%(levelname)s' + reset + magenta + '] ' + location + suffix,
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt, datefmt='%m-%d %H:%M:%S')
        return formatter.format(record)


def colorized_logger(name: str) -> logging.Logger:
    """A lightweight customization of the standard library ``logging`` loggers, to provide
    colorized log messages.

    Args:
        name (str):
            The name of the logger to requisition. Typically a module's ``__name__`` attribute.

    Returns:
        The logger. Handlers are attached only once per logger name.
    """
    logger = logging.getLogger(re.sub(r'^motifminer\.', '', name))
    level = logging.DEBUG
    logger.setLevel(level)
    if not any(isinstance(h.formatter, CustomFormatter) for h in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(CustomFormatter())
        logger.addHandler(stream_handler)
    return logger
