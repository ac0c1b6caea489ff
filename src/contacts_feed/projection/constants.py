"""Feed field names and the logical property table for custom projections."""

# Entry fields
TITLE = "title"
EMAIL = "gd$email"
PHONE_NUMBER = "gd$phoneNumber"

# Attributes within a field object
TEXT = "$t"
ADDRESS = "address"

# rel URIs look like http://schemas.google.com/g/2005#work
REL_DELIMITER = "#"
DEFAULT_LABEL = "default"

# Projection modes
THIN = "thin"
FULL = "full"
PROPERTY_PREFIX = "property-"

# Logical property -> (entry field, attribute)
PROPERTY_FIELDS: dict[str, tuple[str, str]] = {
    "name": (TITLE, TEXT),
    "email": (EMAIL, ADDRESS),
    "phoneNumber": (PHONE_NUMBER, TEXT),
    "id": ("id", TEXT),
    "updated": ("updated", TEXT),
    "content": ("content", TEXT),
    "nickname": ("gContact$nickname", TEXT),
    "birthday": ("gContact$birthday", "when"),
    "im": ("gd$im", ADDRESS),
    "website": ("gContact$website", "href"),
    "organization": ("gd$organization", "rel"),
}
