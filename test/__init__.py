from . import common  # noqa
