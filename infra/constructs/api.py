from aws_cdk import Duration
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# (HTTP メソッド, パス, ハンドラーモジュール, 認証が必要か)
ROUTES: list[tuple[str, str, str, bool]] = [
    ("POST", "auth", "user.handlers.authenticate", False),
    ("POST", "users", "user.handlers.register", False),
    ("GET", "users", "user.handlers.list_users", True),
    ("GET", "users/{user_id}", "user.handlers.get_user", True),
    ("PUT", "users/{user_id}", "user.handlers.update_user", True),
    ("DELETE", "users/{user_id}", "user.handlers.delete_user", True),
    ("GET", "hotels", "hotel.handlers.list_hotels", True),
    ("POST", "hotels", "hotel.handlers.create_hotel", True),
    ("GET", "hotels/{hotel_id}", "hotel.handlers.get_hotel", True),
    ("GET", "hotels/{hotel_id}/rooms", "hotel.handlers.list_hotel_rooms", True),
    ("POST", "hotels/{hotel_id}/rooms", "hotel.handlers.create_room", True),
    ("GET", "rooms", "hotel.handlers.list_rooms", True),
    ("POST", "rooms/{room_id}/book", "booking.handlers.book_room", True),
    ("GET", "bookings", "booking.handlers.list_bookings", True),
    ("GET", "bookings/{booking_id}", "booking.handlers.get_booking", True),
    ("POST", "bookings/{booking_id}/cancel", "booking.handlers.cancel", True),
]


class Api(Construct):
    """API Gateway Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        handlers: dict[str, _lambda.IFunction],
        authorizer_fn: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "HotelReservationRestApi",
            rest_api_name="Hotel Reservation API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        # Lambda Authorizer: X-Api-Token ヘッダーの JWT を検証
        self.authorizer = apigw.TokenAuthorizer(
            self,
            "JwtTokenAuthorizer",
            handler=authorizer_fn,
            identity_source=apigw.IdentitySource.header("X-Api-Token"),
            results_cache_ttl=Duration.seconds(300),
        )

        for method, path, module, requires_auth in ROUTES:
            self._resource(path).add_method(
                method,
                apigw.LambdaIntegration(handlers[module]),
                authorizer=self.authorizer if requires_auth else None,
            )

    def _resource(self, path: str) -> apigw.IResource:
        """パスに対応するリソースを（無ければ作成して）返す"""
        resource: apigw.IResource = self.rest_api.root
        for part in path.split("/"):
            resource = resource.get_resource(part) or resource.add_resource(part)
        return resource
