import sentry_sdk

from ot_payroll.config import Settings


def configure_error_monitoring(settings: Settings) -> None:
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn, environment=settings.env, traces_sample_rate=0.2)
