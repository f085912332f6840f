import urllib3

from minio import Minio


def build_minio_client(config):
    timeout = urllib3.Timeout(
        connect=config["MINIO_CONNECT_TIMEOUT"],
        read=config["MINIO_READ_TIMEOUT"],
    )
    http_client = urllib3.PoolManager(
        timeout=timeout,
        retries=False,
        maxsize=config.get("MINIO_HTTP_POOL_MAXSIZE", 32),
    )

    return Minio(
        config["MINIO_ENDPOINT"],
        access_key=config["MINIO_ACCESS_KEY"],
        secret_key=config["MINIO_SECRET_KEY"],
        secure=config["MINIO_SECURE"],
        http_client=http_client,
    )
