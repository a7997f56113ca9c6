"""Constants for Bootcamp model field names"""


class BootcampFields:
    """Field name constants for Bootcamp model"""
    ID = "id"
    NAME = "name"
    SLUG = "slug"
    DESCRIPTION = "description"
    WEBSITE = "website"
    PHONE = "phone"
    EMAIL = "email"
    ADDRESS = "address"
    LOCATION = "location"
    CAREERS = "careers"
    AVERAGE_RATING = "average_rating"
    AVERAGE_COST = "average_cost"
    PHOTO = "photo"
    HOUSING = "housing"
    JOB_ASSISTANCE = "job_assistance"
    JOB_GUARANTEE = "job_guarantee"
    ACCEPT_GI = "accept_gi"
    USER = "user"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Fields that list queries may filter and sort on
    QUERYABLE = frozenset({
        NAME, SLUG, DESCRIPTION, WEBSITE, PHONE, EMAIL, ADDRESS, CAREERS,
        AVERAGE_RATING, AVERAGE_COST, PHOTO, HOUSING, JOB_ASSISTANCE,
        JOB_GUARANTEE, ACCEPT_GI, USER, CREATED_AT,
        "location.city", "location.state", "location.zipcode", "location.country",
    })

    # Value types used when coercing query-string filters
    NUMERIC = frozenset({AVERAGE_RATING, AVERAGE_COST})
    BOOLEAN = frozenset({HOUSING, JOB_ASSISTANCE, JOB_GUARANTEE, ACCEPT_GI})
    DATETIME = frozenset({CREATED_AT})


class LocationFields:
    """Field name constants for the embedded GeoJSON location"""
    TYPE = "type"
    COORDINATES = "coordinates"
    FORMATTED_ADDRESS = "formatted_address"
    STREET = "street"
    CITY = "city"
    STATE = "state"
    ZIPCODE = "zipcode"
    COUNTRY = "country"
