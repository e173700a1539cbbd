"""Process exit codes for the lintprogress CLI."""

EXIT_SUCCESS = 0
EXIT_ISSUES_FOUND = 1
EXIT_REPORTER_ERROR = 2
EXIT_INVALID_USAGE = 3
