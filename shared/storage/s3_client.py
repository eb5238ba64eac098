import boto3
import structlog
from botocore.exceptions import ClientError
from fastapi.concurrency import run_in_threadpool

from shared.config.settings import Settings
from shared.observability.metrics import object_store_operations_total

logger = structlog.get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


class S3ObjectStore:
    """
    Object storage client for the mirrored product documents.

    boto3 is blocking, so every network call is pushed to the FastAPI
    threadpool and only suspends the request that issued it.
    """

    def __init__(self, bucket_name: str, region: str, s3_client=None,
                 aws_access_key_id: str | None = None, aws_secret_access_key: str | None = None):
        self.bucket_name = bucket_name
        self.region = region
        self.s3_client = s3_client or boto3.client(
            "s3",
            region_name=region,
            # Regional endpoint, virtual-hosted style addressing
            endpoint_url=f"https://s3.{region}.amazonaws.com",
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "S3ObjectStore":
        return cls(
            bucket_name=settings.s3_bucket_name,
            region=settings.aws_region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
        )

    def public_url(self, key: str) -> str:
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"

    @staticmethod
    def key_from_url(file_url: str) -> str:
        """Recover the object key from a URL built by public_url."""
        return file_url.split(".com/", 1)[1]

    async def put_object(self, key: str, body: str | bytes, content_type: str = JSON_CONTENT_TYPE):
        if isinstance(body, str):
            body = body.encode("utf-8")
        try:
            await run_in_threadpool(
                self.s3_client.put_object,
                Bucket=self.bucket_name,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except ClientError as e:
            object_store_operations_total.labels(operation="put", outcome="error").inc()
            logger.error("object_put_failed", bucket=self.bucket_name, key=key,
                         code=e.response.get("Error", {}).get("Code"))
            raise
        object_store_operations_total.labels(operation="put", outcome="ok").inc()
        logger.info("object_put", bucket=self.bucket_name, key=key, size=len(body))

    async def delete_object(self, key: str):
        try:
            await run_in_threadpool(self.s3_client.delete_object, Bucket=self.bucket_name, Key=key)
        except ClientError as e:
            object_store_operations_total.labels(operation="delete", outcome="error").inc()
            logger.error("object_delete_failed", bucket=self.bucket_name, key=key,
                         code=e.response.get("Error", {}).get("Code"))
            raise
        object_store_operations_total.labels(operation="delete", outcome="ok").inc()
        logger.info("object_deleted", bucket=self.bucket_name, key=key)

    def close(self):
        self.s3_client.close()
