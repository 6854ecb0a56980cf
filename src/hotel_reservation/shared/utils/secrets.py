import boto3

_secret_cache: dict[str, str] = {}


def get_secret(secret_id: str) -> str:
    """Secrets Manager からシークレット文字列を取得する（コンテナ単位でキャッシュ）"""
    if secret_id not in _secret_cache:
        client = boto3.client("secretsmanager")
        response = client.get_secret_value(SecretId=secret_id)
        _secret_cache[secret_id] = response["SecretString"]
    return _secret_cache[secret_id]
