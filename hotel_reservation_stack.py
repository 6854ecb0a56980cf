from aws_cdk import CfnOutput, Stack
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers


class HotelReservationStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        jwt_secret = secretsmanager.Secret(
            self,
            "JwtSecret",
            secret_name="/hotel-reservation/jwt-secret",
            generate_secret_string=secretsmanager.SecretStringGenerator(
                exclude_punctuation=True,
                password_length=64,
            ),
        )

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            jwt_secret=jwt_secret,
        )

        api = Api(
            self,
            "Api",
            handlers=fns.handlers,
            authorizer_fn=fns.authorizer,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "TableName", value=database.table.table_name)
