"""Constants for Person model field names"""


class PersonFields:
    """Field name constants for Person model"""
    NAME = "name"
    AGE = "age"
    CITY = "city"
    PROFESSION = "profession"
    SALARY = "salary"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class ReportFields:
    """Output field names used by the aggregation pipelines"""
    AVERAGE_SALARY = "average_salary"
    TOTAL_SALARY = "total_salary"
    SAMPLE_NAME = "sample_name"
    COUNT = "count"
