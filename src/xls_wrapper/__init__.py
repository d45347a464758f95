"""Read and write Excel 97-2003 workbooks with deduplicated cell formatting."""

from xls_wrapper._version import __version__
from xls_wrapper.cell import *  # noqa: F403
from xls_wrapper.constants import *  # noqa: F403
from xls_wrapper.document import *  # noqa: F403
from xls_wrapper.exceptions import *  # noqa: F403
from xls_wrapper.records import *  # noqa: F403
from xls_wrapper.style import *  # noqa: F403
from xls_wrapper.workbook import *  # noqa: F403


def _get_version() -> str:
    return __version__
