"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    HOBBIES = "hobbies"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field, the only stored identity
    
    # Fields a client may set through create/patch
    WRITABLE = (NAME, HOBBIES)
