import pytest


@pytest.fixture(autouse=True)
def aws_env(monkeypatch):
    # fake credentials so no test can reach a real account
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("S3_BUCKET_NAME", "test-bucket")


@pytest.fixture
def bucket_name():
    return "test-bucket"
