"""Constants for BlogEntry model field names"""


class BlogFields:
    """Field name constants for BlogEntry model"""
    ID = "id"
    TITLE = "title"
    AUTHOR = "author"
    URL = "url"
    LIKES = "likes"
    OWNER = "owner"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    VERSION = "__v"  # document version counter written by some clients

    # Never accepted from clients; the store assigns identity
    IDENTIFIER_FIELDS = (ID, MONGO_ID, VERSION)

    UPDATABLE_FIELDS = (TITLE, AUTHOR, URL, LIKES, OWNER)
