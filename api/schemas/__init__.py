"""
API Schemas - Pydantic models for request/response documentation

Records are schema-less: these models document the usual fields of each
resource and accept any extra ones. Required-field checks happen in the
repositories, not here.
"""
