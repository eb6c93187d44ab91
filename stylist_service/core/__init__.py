# Core module
from stylist_service.core.validation import (
    ValidationError,
    PhotoUnavailableError,
    PhotoPayload,
    parse_data_uri,
    validate_photo_data_uri,
    validate_file_size,
    validate_mime_type,
    load_photo_data_uri,
)
