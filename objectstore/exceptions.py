# exceptions.py

# this module holds the error types raised by the storage client.
# it includes:
# - StorageConfigError: required configuration is missing
# - ObjectNotFoundError: the object store reports the key does not exist

from botocore.exceptions import ClientError


class StorageConfigError(ValueError):
    """Raised when AWS_REGION or S3_BUCKET_NAME is missing."""
    pass


class ObjectNotFoundError(ClientError):
    """The not-found answer to a HeadObject request.

    Still a ClientError carrying the provider's response and operation name,
    so `except ClientError` keeps catching it.
    """

    def __init__(self, error: ClientError, bucket: str, key: str):
        super().__init__(error.response, error.operation_name)
        self.bucket = bucket
        self.key = key
