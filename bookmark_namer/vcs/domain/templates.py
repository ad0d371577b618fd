"""jj log templates used to render commit messages."""

from bookmark_namer.vcs.domain.value_objects import COMMIT_SEPARATOR, LogFormat

ONE_LINE_TEMPLATE = 'if(description, description.first_line() ++ "\\n", "")'

FULL_TEMPLATE = f'if(description, description, "") ++ "\\n{COMMIT_SEPARATOR}\\n"'

LOG_TEMPLATES: dict[LogFormat, str] = {
    LogFormat.ONE_LINE: ONE_LINE_TEMPLATE,
    LogFormat.FULL: FULL_TEMPLATE,
}


def template_for(log_format: LogFormat) -> str:
    """Return the jj template rendering commits in the given format."""
    return LOG_TEMPLATES[log_format]
