"""Media-type tokens understood by the library endpoints."""

JSON = "application/json"
XML = "application/xml"

BOOK = "application/vnd.library.book+json"
BOOK_WITH_CONCATENATED_AUTHOR_NAME = "application/vnd.library.bookwithconcatenatedauthorname+json"

BOOK_FOR_CREATION = "application/vnd.library.bookforcreation+json"
BOOK_FOR_CREATION_WITH_AMOUNT_OF_PAGES = "application/vnd.library.bookforcreationwithamountofpages+json"

# Accept tokens answered by single-representation endpoints, and the type each gets.
# text/json is not offered.
GENERIC_ACCEPT = {
    JSON: JSON,
    XML: XML,
    "application/*": JSON,
    "*/*": JSON,
}
