"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    NAME = "name"
    PASSWORD_HASH = "password_hash"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    USERNAME_MIN_LENGTH = 3
    PASSWORD_MIN_LENGTH = 3
