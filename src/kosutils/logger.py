"""logging facilities

The way to use this is as follows:

* each module declares its own logger, using:

    from .logger import create_logger
    logger = create_logger()

* then each module uses logger.info/warning/debug/etc according to the
  level it believes is appropriate:

    logger.debug('debugging info for developers or power users')
    logger.info('normal, informational output')
    logger.warning('warn about a non-fatal error or sth else')
    logger.error('a fatal error')

  ... and so on. see the `logging documentation
  <https://docs.python.org/3/howto/logging.html#when-to-use-logging>`_
  for more information

* kosutils is a library: the application owns the logging setup. If it
  never calls setup_logging(), records just go through the standard
  logging machinery (and its "last resort" handler).

* setup_logging() is for applications and tests that want the kosutils
  defaults: a logging.conf file (KOS_LOGGING_CONF or the config dir) or
  a plain / json formatted stderr handler.
"""

import inspect
import json
import logging
import logging.config
import logging.handlers  # needed for handlers defined there being configurable in logging.conf file
import os
import sys
import warnings
from pathlib import Path

configured = False


class StderrHandler(logging.StreamHandler):
    """
    This class is like a StreamHandler using sys.stderr, but always uses
    whatever sys.stderr is currently set to rather than the value of
    sys.stderr at handler construction time.
    """

    def __init__(self, stream=None):
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


def _log_warning(message, category, filename, lineno, file=None, line=None):
    # for warnings, we just want to use the logging system, not stderr or other files
    msg = f"{filename}:{lineno}: {category.__name__}: {message}"
    logger = create_logger(__name__)
    # Note: the warning will look like coming from here,
    # but msg contains info about where it really comes from
    logger.warning(msg)


def remove_handlers(logger):
    for handler in logger.handlers[:]:
        handler.flush()
        handler.close()
        logger.removeHandler(handler)


def flush_logging():
    for handler in logging.getLogger().handlers:
        handler.flush()


def default_conf_fname():
    """logging.conf in the kosutils config dir, if there is one"""
    from .helpers.fs import get_config_dir

    conf_path = Path(get_config_dir(create=False)) / "logging.conf"
    return str(conf_path) if conf_path.is_file() else None


def setup_logging(stream=None, conf_fname=None, env_var="KOS_LOGGING_CONF", level="info", log_json=False):
    """setup logging module according to the arguments provided

    if conf_fname is given (or the config file name can be determined via
    the env_var, if given, or a logging.conf exists in the config dir):
    load this logging configuration.

    otherwise, set up a stream handler logger on stderr (by default, if no
    stream is provided).
    """
    global configured
    err_msg = None
    if env_var:
        conf_fname = os.environ.get(env_var, conf_fname)
    if conf_fname is None and env_var:
        conf_fname = default_conf_fname()
    if conf_fname:
        try:
            conf_path = Path(conf_fname).absolute()
            # we open the conf file here to be able to give a reasonable
            # error message in case of failure (if we give the filename to
            # fileConfig(), it silently ignores unreadable files and gives
            # unhelpful error msgs like "No section: 'formatters'").
            # existing loggers stay enabled: they belong to the application and other libraries.
            with conf_path.open() as f:
                logging.config.fileConfig(f, disable_existing_loggers=False)
            configured = True
            logger = logging.getLogger(__name__)
            logger.debug(f'using logging configuration read from "{conf_fname}"')
            warnings.showwarning = _log_warning
            return None
        except Exception as err:  # XXX be more precise
            err_msg = str(err)

    # if we did not / not successfully load a logging configuration, fallback to this:
    level = level.upper()
    fmt = "%(message)s"
    formatter = JsonFormatter(fmt) if log_json else logging.Formatter(fmt)
    SHandler = StderrHandler if stream is None else logging.StreamHandler
    handler = SHandler(stream)
    handler.setFormatter(formatter)
    logger = logging.getLogger()
    remove_handlers(logger)
    logger.setLevel(level)
    logger.addHandler(handler)

    configured = True

    logger = logging.getLogger(__name__)
    if err_msg:
        logger.warning(f'setup_logging for "{conf_fname}" failed with "{err_msg}".')
    logger.debug("using builtin fallback logging configuration")
    warnings.showwarning = _log_warning
    return handler


def find_parent_module():
    """find the name of the first module calling this module

    if we cannot find it, we return the current module's name
    (__name__) instead.
    """
    try:
        frame = inspect.currentframe().f_back
        module = inspect.getmodule(frame)
        while module is None or module.__name__ == __name__:
            frame = frame.f_back
            module = inspect.getmodule(frame)
        return module.__name__
    except AttributeError:
        # somehow we failed to find our module
        # return the logger module name by default
        return __name__


def _with_msgid(kwargs):
    # msgid is passed on as an "extra" record attribute, see JsonFormatter
    if "msgid" in kwargs:
        kwargs.setdefault("extra", {})["msgid"] = kwargs.pop("msgid")
    return kwargs


class LazyLogger:
    def __init__(self, name=None):
        self.__name = name or find_parent_module()
        self.__real_logger = None

    @property
    def __logger(self):
        if self.__real_logger is None:
            self.__real_logger = logging.getLogger(self.__name)
        return self.__real_logger

    @property
    def name(self):
        return self.__name

    def getChild(self, suffix):
        return LazyLogger(self.__name + "." + suffix)

    def setLevel(self, level):
        return self.__logger.setLevel(level)

    def isEnabledFor(self, level):
        return self.__logger.isEnabledFor(level)

    def log(self, level, msg, *args, **kwargs):
        return self.__logger.log(level, msg, *args, **_with_msgid(kwargs))

    def exception(self, msg, *args, exc_info=True, **kwargs):
        return self.__logger.exception(msg, *args, exc_info=exc_info, **_with_msgid(kwargs))

    def debug(self, msg, *args, **kwargs):
        return self.__logger.debug(msg, *args, **_with_msgid(kwargs))

    def info(self, msg, *args, **kwargs):
        return self.__logger.info(msg, *args, **_with_msgid(kwargs))

    def warning(self, msg, *args, **kwargs):
        return self.__logger.warning(msg, *args, **_with_msgid(kwargs))

    def error(self, msg, *args, **kwargs):
        return self.__logger.error(msg, *args, **_with_msgid(kwargs))

    def critical(self, msg, *args, **kwargs):
        return self.__logger.critical(msg, *args, **_with_msgid(kwargs))


def create_logger(name: str = None) -> LazyLogger:
    """lazily create a Logger object with the proper path, which is returned by
    find_parent_module() by default, or is given explicitly

    this is really a shortcut for:

        logger = logging.getLogger(__name__)

    we use it to avoid errors and provide a more standard API.

    The logger is created lazily because this is usually called from
    module level (and thus executed at import time), possibly before the
    application configured logging.
    """

    return LazyLogger(name)


class JsonFormatter(logging.Formatter):
    RECORD_ATTRIBUTES = (
        "levelname",
        "name",
        "message",
        # msgid is an attribute we made up to expose a non-changing handle for log messages
        "msgid",
    )

    def format(self, record):
        super().format(record)
        data = {"type": "log_message", "time": record.created, "message": "", "levelname": "CRITICAL"}
        for attr in self.RECORD_ATTRIBUTES:
            value = getattr(record, attr, None)
            if value:
                data[attr] = value
        return json.dumps(data)
