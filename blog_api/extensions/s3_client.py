import boto3


def build_s3_client(config):
    return boto3.client(
        service_name="s3",
        aws_access_key_id=config.get("S3_ACCESS_KEY_ID"),
        aws_secret_access_key=config.get("S3_SECRET_ACCESS_KEY"),
        region_name=config.get("S3_REGION"),
        endpoint_url=config.get("S3_ENDPOINT_URL"),
    )
