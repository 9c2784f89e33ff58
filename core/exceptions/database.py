class StoreError(Exception):
    """Base exception for document store operations"""
    pass

class ConnectionError(StoreError):
    """Document store connection error"""
    pass

class QueryError(StoreError):
    """Document store read or write error"""
    pass
