# bluetraffic/util/errors.py


class DataLoadError(RuntimeError):
    """Station or trip snapshot could not be fetched or parsed."""
