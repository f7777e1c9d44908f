__title__ = "exitstatus"
__description__ = "Pick meaningful process exit codes for (chained) exceptions."
__url__ = "https://pypi.org/project/exitstatus/"
__version__ = "1.0.0"
__license__ = "GPLv3"
