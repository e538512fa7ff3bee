# storage_client.py

# this module provides the StorageClient facade over a single S3 bucket.
# it includes:
# - StorageClient.exists(): checks if an object exists at a key
# - StorageClient.upload(): uploads a JSON string to a key
# - StorageClient.close(): releases the underlying boto3 client

from typing import Optional

from botocore.exceptions import ClientError

from objectstore.config import StorageConfig, get_storage_config
from objectstore.exceptions import ObjectNotFoundError
from objectstore.utils.s3_io import is_not_found, object_uri, s3_client

JSON_CONTENT_TYPE = "application/json"


class StorageClient:
    """Checks for and uploads JSON objects in one bucket.

    Each call is a single request with no retry. Only a not-found answer to an
    existence check is handled here, every other error reaches the caller as
    boto3 raised it.
    """

    def __init__(self, config: Optional[StorageConfig] = None, client=None):
        # resolve and validate config before any network handle is created
        if config is None:
            config = get_storage_config()
        self.region = config.region
        self.bucket_name = config.bucket_name
        self.client = client if client is not None else s3_client(config.region)

    def exists(self, key: str) -> bool:
        try:
            self._head(key)
            return True
        except ObjectNotFoundError:
            return False

    def upload(self, key: str, body: str) -> None:
        """Upload body to key, replacing any existing object.

        Parameters:
            key (str): The full S3 key (path) for the destination object.
            body (str): JSON text; it is stored as-is with an application/json content type.
        """
        self.client.put_object(
            Bucket=self.bucket_name,
            Key=key,
            Body=body.encode("utf-8"),
            ContentType=JSON_CONTENT_TYPE,
        )
        print(f"Successfully uploaded to S3: {object_uri(self.bucket_name, key)}")

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # metadata-only request; not-found becomes ObjectNotFoundError, anything else is re-raised as is
    def _head(self, key: str):
        try:
            return self.client.head_object(Bucket=self.bucket_name, Key=key)
        except ClientError as e:
            if is_not_found(e):
                raise ObjectNotFoundError(e, bucket=self.bucket_name, key=key) from e
            raise
