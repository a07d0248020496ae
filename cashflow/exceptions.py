"""
Custom exceptions for the CashFlow Manager API.

The HTTP layer maps each of them to a status code and a JSON envelope.
"""


class CashFlowException(Exception):
    """Base exception for CashFlow errors"""

    status_code = 500
    error = 'Internal Server Error'

    def __init__(self, message, error_code=None):
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def to_dict(self):
        return {'error': self.error, 'message': self.message}


class InvalidInput(CashFlowException):
    """Malformed or out-of-range input"""

    status_code = 400
    error = 'Invalid Input'

    def __init__(self, message, field=None):
        super().__init__(message, 'INVALID_INPUT')
        self.field = field


class NotFound(CashFlowException):
    """Unknown entity"""

    status_code = 404
    error = 'Not Found'

    def __init__(self, entity, entity_id):
        message = f"{entity} '{entity_id}' not found"
        super().__init__(message, 'NOT_FOUND')
        self.entity = entity
        self.entity_id = entity_id


class InternalError(CashFlowException):
    """Unexpected fault in a computation or in the data store"""

    def __init__(self, message='Unexpected error'):
        super().__init__(message, 'INTERNAL_ERROR')
