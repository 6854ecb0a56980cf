from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from infra.constructs.layers import RUNTIME

# (Construct ID, ハンドラーモジュール, サービス名, 書き込み権限が必要か)
HANDLERS: list[tuple[str, str, str, bool]] = [
    ("AuthenticateFn", "user.handlers.authenticate", "user-service", False),
    ("RegisterUserFn", "user.handlers.register", "user-service", True),
    ("ListUsersFn", "user.handlers.list_users", "user-service", False),
    ("GetUserFn", "user.handlers.get_user", "user-service", False),
    ("UpdateUserFn", "user.handlers.update_user", "user-service", True),
    ("DeleteUserFn", "user.handlers.delete_user", "user-service", True),
    ("CreateHotelFn", "hotel.handlers.create_hotel", "hotel-service", True),
    ("GetHotelFn", "hotel.handlers.get_hotel", "hotel-service", False),
    ("ListHotelsFn", "hotel.handlers.list_hotels", "hotel-service", False),
    ("ListHotelRoomsFn", "hotel.handlers.list_hotel_rooms", "hotel-service", False),
    ("CreateRoomFn", "hotel.handlers.create_room", "hotel-service", True),
    ("ListRoomsFn", "hotel.handlers.list_rooms", "hotel-service", False),
    ("BookRoomFn", "booking.handlers.book_room", "booking-service", True),
    ("GetBookingFn", "booking.handlers.get_booking", "booking-service", False),
    ("ListBookingsFn", "booking.handlers.list_bookings", "booking-service", False),
    ("CancelBookingFn", "booking.handlers.cancel", "booking-service", True),
]


class Functions(Construct):
    """Lambda 関数を管理する Construct

    handlers[<モジュール名>] で各ハンドラーの関数を参照できる。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        jwt_secret: secretsmanager.ISecret,
    ) -> None:
        super().__init__(scope, id)
        self._table = table
        self._common_layer = common_layer
        self._jwt_secret = jwt_secret

        self.handlers: dict[str, _lambda.Function] = {}
        for construct_id, module, service_name, writes in HANDLERS:
            fn = self._create_function(
                construct_id,
                f"hotel_reservation.{module}.lambda_handler",
                service_name,
            )
            if writes:
                table.grant_read_write_data(fn)
            else:
                table.grant_read_data(fn)
            self.handlers[module] = fn

        # トークン発行に署名鍵が必要
        jwt_secret.grant_read(self.handlers["user.handlers.authenticate"])

        self.authorizer = self._create_function(
            "TokenAuthorizerFn",
            "authorizer.handler.lambda_handler",
            "authorizer",
        )
        table.grant_read_data(self.authorizer)
        jwt_secret.grant_read(self.authorizer)

    @property
    def all_functions(self) -> list[_lambda.Function]:
        return [*self.handlers.values(), self.authorizer]

    def _create_function(
        self, id: str, handler: str, service_name: str
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=RUNTIME,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            timeout=Duration.seconds(10),
            environment={
                "TABLE_NAME": self._table.table_name,
                "JWT_SECRET_ARN": self._jwt_secret.secret_arn,
                "POWERTOOLS_SERVICE_NAME": service_name,
            },
        )
