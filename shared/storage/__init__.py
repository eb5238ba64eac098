from .s3_client import S3ObjectStore, JSON_CONTENT_TYPE

__all__ = ["S3ObjectStore", "JSON_CONTENT_TYPE"]
