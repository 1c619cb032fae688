"""Authentication service: signup, login and token-based identity."""

from uuid import UUID

from structlog.stdlib import BoundLogger

from app.errors.auth import InvalidCredentialsError, UserNotFoundError
from app.errors.database import DuplicateEntryError
from app.managers.password_manager import dummy_verify, hash_password, verify_password
from app.managers.token_manager import create_access_token, decode_access_token
from app.models import UserDB
from app.monitoring import get_logger
from app.repositories import UserRepository
from app.schemas.auth import AuthResult
from app.schemas.user import LoginRequest, SignupRequest, UserResponse

EMAIL_ALREADY_REGISTERED = "Email already registered"


class AuthService:
    """Service for handling user registration and authentication."""

    def __init__(
        self,
        user_repo: UserRepository,
        logger: BoundLogger | None = None,
    ) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
            logger: Logger for auth events; defaults to this module's logger
        """
        self.user_repo = user_repo
        self.logger = logger or get_logger(__name__)

    def _result(self, user: UserDB) -> AuthResult:
        return AuthResult(
            user=UserResponse.model_validate(user),
            token=create_access_token(user.id),
        )

    async def signup(self, request: SignupRequest) -> AuthResult:
        """
        Register a new user and issue a token.

        The password is hashed here, explicitly, before the user is stored.

        Args:
            request: Validated signup payload (email already normalized)

        Returns:
            AuthResult: The new user and an access token

        Raises:
            DuplicateEntryError: If the email is already registered
        """
        if await self.user_repo.email_exists(request.email):
            raise DuplicateEntryError(EMAIL_ALREADY_REGISTERED)

        password_hash = await hash_password(request.password.get_secret_value())
        user = await self.user_repo.insert(
            UserDB(
                first_name=request.first_name,
                last_name=request.last_name,
                email=request.email,
                password_hash=password_hash,
            ),
        )

        self.logger.info("User registered successfully", user_id=str(user.id), email=user.email)
        return self._result(user)

    async def login(self, request: LoginRequest) -> AuthResult:
        """
        Check credentials and issue a token.

        Unknown emails and wrong passwords fail the same way, after the same
        amount of hashing work.

        Args:
            request: Login payload

        Returns:
            AuthResult: The user and an access token

        Raises:
            InvalidCredentialsError: If the email or password is wrong
        """
        user = await self.user_repo.get_by_email(request.email)
        if user is None:
            await dummy_verify()
            self.logger.info("Login failed", reason="unknown email")
            raise InvalidCredentialsError

        if not await verify_password(request.password.get_secret_value(), user.password_hash):
            self.logger.info("Login failed", reason="wrong password", user_id=str(user.id))
            raise InvalidCredentialsError

        self.logger.info("User logged in successfully", user_id=str(user.id), email=user.email)
        return self._result(user)

    async def get_user(self, user_id: UUID) -> UserDB:
        """
        Load the user a token refers to.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError
        return user

    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """
        Public view of the identified user.

        Args:
            user_id: Identity from a verified token

        Returns:
            UserResponse: The user without the password hash

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        return UserResponse.model_validate(await self.get_user(user_id))

    async def authenticate(self, token: str) -> UserDB:
        """
        Resolve a bearer token to its user.

        Args:
            token: Encoded access token

        Returns:
            UserDB: The authenticated user

        Raises:
            TokenExpiredError: If the token has expired
            InvalidTokenError: If the token is not valid
            UserNotFoundError: If the token's user no longer exists
        """
        token_data = decode_access_token(token)
        return await self.get_user(token_data.user_id)
