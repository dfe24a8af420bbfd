"""Constants for Hobby model field names"""


class HobbyFields:
    """Field name constants for Hobby model"""
    ID = "id"
    NAME = "name"
    PASSION_LEVEL = "passionLevel"
    YEAR = "year"
    
    # Request-only: the owning user on create
    USER_ID = "userId"
    
    # MongoDB specific
    MONGO_ID = "_id"
    
    WRITABLE = (NAME, PASSION_LEVEL, YEAR)
