"""
Error handling middleware
"""
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from utils.exceptions import (
    BusinessError,
    business_error_handler,
    request_validation_error_handler,
    http_error_handler,
    general_error_handler
)

def add_error_handlers(app: FastAPI):
    """Map data layer and request errors to the JSON error envelope"""
    
    # ValidationError (422), NotFoundError (404), PersistenceError (503)
    app.add_exception_handler(BusinessError, business_error_handler)
    
    # Malformed request bodies share the ValidationError shape
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    
    app.add_exception_handler(HTTPException, http_error_handler)
    
    # Anything else is a 500 with a generic message
    app.add_exception_handler(Exception, general_error_handler)
