"""
Progress Formatting

Pure helpers that turn counts and elapsed times into the text written by the
progress reporter.
"""


def compute_percent(done: int, total: int) -> int:
    """
    Completion percentage for `done` out of `total`, floored and clamped to [0, 100].

    A total below 1 is treated as 1, so an unknown total reads 0% until the
    first item is done and 100% afterwards.
    """
    denominator = max(1, total)
    percent = (100 * max(0, done)) // denominator
    return min(100, percent)


def format_clock(seconds: float) -> str:
    """
    Render a duration as a clock, truncated to whole seconds.

    Examples:
        >>> format_clock(65)
        '00:01:05'
        >>> format_clock(90061)
        '1.01:01:01'
    """
    total = int(seconds)
    days, remainder = divmod(total, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)
    clock = f"{hours:02d}:{minutes:02d}:{secs:02d}"
    if days:
        return f"{days}.{clock}"
    return clock


def _trim_number(value: float) -> str:
    text = f"{value:.2f}"
    return text.rstrip("0").rstrip(".")


def format_duration(seconds: float) -> str:
    """
    Format an elapsed time for completion summaries.

    Long operations get a coarse clock, short ones keep sub-second precision:

    - more than a minute: clock form, e.g. ``00:01:05``
    - more than a second: seconds with up to 2 decimals, e.g. ``1.5s``
    - otherwise: milliseconds with up to 2 decimals, e.g. ``500ms``

    Args:
        seconds: Elapsed time in seconds

    Returns:
        Human-readable duration string
    """
    if seconds / 60 > 1:
        return format_clock(seconds)
    if seconds > 1:
        return _trim_number(seconds) + "s"
    return _trim_number(seconds * 1000) + "ms"


def format_progress_line(name: str, done: int, total: int, elapsed_ms: int, width: int = 3) -> str:
    """
    Build one progress line, including its terminator.

    In-progress lines end with a carriage return so the next one overwrites
    them; the completing line ends with a newline.
    """
    percent = str(compute_percent(done, total)).rjust(width)
    duration = format_clock(elapsed_ms // 1000)
    eol = "\n" if done == total else "\r"
    return f"{name}: {percent}% ({done}/{total}), {duration} {eol}"
