class ConfigurationError(Exception):
    """
    Exception raised when the run cannot start because of invalid configuration.

    This covers an input directory that does not exist or is not a directory, and
    exclusion files that cannot be found. It is always raised before the output
    file is created.

    Example:
        >>> error = ConfigurationError("Input directory does not exist: /missing")
        >>> str(error)
        'Input directory does not exist: /missing'
    """

    pass


class ContentDecodingError(ValueError):
    """
    Exception raised when a file's bytes cannot be decoded as text.

    The whole run is aborted when this happens; there is no binary fallback.
    The original ``UnicodeDecodeError`` is available as ``__cause__``.

    Attributes:
        file_path (str): Path to the file that could not be decoded.
        encoding (str): Encoding that was used to decode it.

    Example:
        >>> error = ContentDecodingError("/path/to/image.png", "utf-8")
        >>> str(error)
        "Cannot decode /path/to/image.png as 'utf-8' text"
    """

    def __init__(self, file_path: str, encoding: str = "utf-8") -> None:
        """
        Initialize the exception with the path of the offending file.

        Args:
            file_path (str): Path to the file that could not be decoded.
            encoding (str, optional): Encoding used for decoding. Defaults to "utf-8".
        """
        self.file_path = file_path
        self.encoding = encoding
        super().__init__(f"Cannot decode {file_path} as '{encoding}' text")
