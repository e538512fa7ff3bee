# utils/s3_io.py

# this module provides the boto3 glue used by the storage client.
# it includes:
# - s3_client(): creates an S3 client for a region with botocore retries turned off
# - object_uri(): formats the s3://bucket/key location of an object
# - is_not_found(): tells whether a ClientError means the object does not exist

# import boto3 for S3 operations and botocore for client config and errors
import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

# error codes S3 uses to report a missing object (HeadObject has no body, so it only sends "404")
NOT_FOUND_CODES = {"404", "NotFound", "NoSuchKey"}

# a single attempt per request, botocore must not retry on our behalf
SINGLE_ATTEMPT = Config(retries={"total_max_attempts": 1, "mode": "standard"})


# create an S3 client for the given region
def s3_client(region: str):
    return boto3.client("s3", region_name=region, config=SINGLE_ATTEMPT)


# build the fully qualified location of an object
def object_uri(bucket: str, key: str) -> str:
    return f"s3://{bucket}/{key}"


# check if a ClientError is the object store saying the key is absent
def is_not_found(error: ClientError) -> bool:
    if error_code(error) in NOT_FOUND_CODES:
        return True
    return status_code(error) == 404


def error_code(error: ClientError):
    return error.response.get("Error", {}).get("Code")


def status_code(error: ClientError):
    return error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
