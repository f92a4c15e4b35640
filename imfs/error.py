#    CLASS NodeAlreadyPresentError
# ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼

class NodeAlreadyPresentError(RuntimeError):
    def __init__(self, msg: str = None):
        if msg is None:
            msg = f'Node already present in tree!'
        super(NodeAlreadyPresentError, self).__init__(msg)


#    CLASS NodeNotPresentError
# ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼

class NodeNotPresentError(RuntimeError):
    def __init__(self, msg: str = None):
        if msg is None:
            msg = f'Node not present in tree!'
        super(NodeNotPresentError, self).__init__(msg)


#    CLASS CacheError
# ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼

class CacheError(RuntimeError):
    """Parent of all errors raised by Cache for a given location"""
    def __init__(self, location: str, msg: str = None):
        if msg is None:
            msg = f'Cache error for location: {location}'
        super(CacheError, self).__init__(msg)
        self.location = location


#    CLASS LocationDoesNotExistError
# ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼

class LocationDoesNotExistError(CacheError):
    def __init__(self, location: str, msg: str = None):
        if msg is None:
            # Set some default useful error message
            msg = f'Location does not exist: "{location}"'
        super(LocationDoesNotExistError, self).__init__(location, msg)


#    CLASS LocationAlreadyExistsError
# ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼

class LocationAlreadyExistsError(CacheError):
    def __init__(self, location: str, msg: str = None):
        if msg is None:
            msg = f'Location already exists: "{location}"'
        super(LocationAlreadyExistsError, self).__init__(location, msg)


#    CLASS LocationNotADirectoryError
# ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼

class LocationNotADirectoryError(CacheError):
    def __init__(self, location: str, msg: str = None):
        if msg is None:
            msg = f'Location is not a directory: "{location}"'
        super(LocationNotADirectoryError, self).__init__(location, msg)


#    CLASS ScanFailedError
# ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼

class ScanFailedError(CacheError):
    """Storage failed partway through the initial scan. The root itself existed; see LocationDoesNotExistError for that case."""
    def __init__(self, location: str, cause: Exception = None, msg: str = None):
        if msg is None:
            msg = f'Scan failed at "{location}": {cause}'
        super(ScanFailedError, self).__init__(location, msg)
        self.cause = cause
