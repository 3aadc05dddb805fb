import structlog
from supabase import create_client

from utils.account_directory import SupabaseAccountDirectory
from utils.exceptions import ConfigurationError
from utils.password_reset_service import PasswordResetService, ResetConfig, ResetOptions


logger = structlog.get_logger(__name__)


def build_reset_config(config) -> ResetConfig:
    """Build a ResetConfig from a Config-like mapping (e.g. app.config)"""
    options = ResetOptions.from_mapping({
        'salt_rounds': config.get('PASSWORD_RESET_SALT_ROUNDS'),
        'password_length': config.get('PASSWORD_RESET_LENGTH'),
        'from_email': config.get('PASSWORD_RESET_FROM_EMAIL'),
        'from_name': config.get('PASSWORD_RESET_FROM_NAME'),
        'subject': config.get('PASSWORD_RESET_SUBJECT'),
    })
    return ResetConfig(
        supabase_url=config.get('SUPABASE_URL'),
        supabase_key=config.get('SUPABASE_SECRET_KEY'),
        mailgun_api_key=config.get('MAILGUN_API_KEY'),
        mailgun_domain=config.get('MAILGUN_DOMAIN'),
        options=options,
        mailgun_base_url=config.get('MAILGUN_BASE_URL'),
    )


def init_supabase(app):
    """Initialize Supabase client"""
    supabase_url = app.config.get('SUPABASE_URL')
    supabase_key = app.config.get('SUPABASE_SECRET_KEY')
    if supabase_url and supabase_key:
        app.supabase_client = create_client(supabase_url, supabase_key)
        logger.info("Supabase client initialized")
    else:
        app.supabase_client = None
        logger.warning("Supabase not configured - authentication disabled")


def init_password_reset_service(app):
    """Initialize the password reset service, reusing the app's Supabase client"""
    try:
        reset_config = build_reset_config(app.config)
    except ConfigurationError as e:
        app.password_reset_service = None
        logger.warning("Password reset service not configured", reason=str(e))
        return

    directory = None
    if getattr(app, 'supabase_client', None):
        directory = SupabaseAccountDirectory(app.supabase_client)

    app.password_reset_service = PasswordResetService(reset_config, directory=directory)
    logger.info("Password reset service initialized", mailgun_domain=reset_config.mailgun_domain)
