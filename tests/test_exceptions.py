from dircombine.exceptions import ConfigurationError, ContentDecodingError


def test_configuration_error_message():
    error = ConfigurationError("Input directory does not exist: /missing")
    assert str(error) == "Input directory does not exist: /missing"


def test_content_decoding_error():
    error = ContentDecodingError("/path/to/image.png")
    assert isinstance(error, ValueError)
    assert error.file_path == "/path/to/image.png"
    assert error.encoding == "utf-8"
    assert str(error) == "Cannot decode /path/to/image.png as 'utf-8' text"


def test_content_decoding_error_custom_encoding():
    error = ContentDecodingError("data.txt", "latin-1")
    assert "'latin-1'" in str(error)
