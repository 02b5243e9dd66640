import logging
import traceback


def handle_exception(e: Exception, message: str = "An error occurred", source: str = "app"):
    """
    Log an exception with the frame it was raised from and its traceback
    Args:
        e: The exception
        message: Custom error message
        source: Source of the error (web/startup)
    """
    error_traceback = "".join(traceback.format_tb(e.__traceback__))

    frames = traceback.extract_tb(e.__traceback__)
    if frames:
        tb = frames[-1]
        error_location = f'File "{tb.filename}", line {tb.lineno}, in {tb.name}'
    else:
        error_location = "unknown"

    error_message = (
        f"{message}: {e!r}\n"
        f"Location: {error_location}\n"
        f"Full traceback:\n{error_traceback}"
    )
    logging.error(error_message, extra={"source": source})
    return error_message
