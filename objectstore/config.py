# config.py

# this module builds the configuration for the storage client.
# it includes:
# - StorageConfig: region and bucket name, validated on construction
# - get_storage_config(): reads AWS_REGION and S3_BUCKET_NAME from the environment

# import python os module for environment variables
import os

from objectstore.exceptions import StorageConfigError

# names of the environment variables the client is configured from
REGION_ENV = "AWS_REGION"
BUCKET_ENV = "S3_BUCKET_NAME"


class StorageConfig:
    def __init__(self, region: str, bucket_name: str):
        # collect every missing value so one error names all of them
        missing = []
        if not region:
            missing.append(REGION_ENV)
        if not bucket_name:
            missing.append(BUCKET_ENV)
        if missing:
            raise StorageConfigError(f"{' and '.join(missing)} environment variables must be set.")
        self.region = region
        self.bucket_name = bucket_name

    def __repr__(self):
        return f"StorageConfig(region={self.region!r}, bucket_name={self.bucket_name!r})"


# read the storage configuration from the environment, failing fast if anything is missing
def get_storage_config() -> StorageConfig:
    region = os.getenv(REGION_ENV)
    bucket_name = os.getenv(BUCKET_ENV)
    return StorageConfig(region=region, bucket_name=bucket_name)
