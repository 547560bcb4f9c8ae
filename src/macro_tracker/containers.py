"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.email_client import HttpxEmailClient
from macro_tracker.adapters.google_forms_client import HttpxGoogleFormsClient
from macro_tracker.adapters.openai_macro_client import OpenAIMacroClient
from macro_tracker.adapters.supabase_log_repository import SupabaseLogRepository
from macro_tracker.adapters.supabase_recap_repository import SupabaseRecapRepository
from macro_tracker.adapters.supabase_saved_item_repository import (
    SupabaseSavedItemRepository,
)
from macro_tracker.config import Settings
from macro_tracker.services.estimator import MacroEstimator
from macro_tracker.services.forms import FormService
from macro_tracker.services.notifications import NotificationService
from macro_tracker.services.recaps import RecapProducer
from macro_tracker.services.saved_items import SavedItemService
from macro_tracker.services.submissions import SubmissionHandler
from macro_tracker.services.totals import DailyAccumulator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    estimator: MacroEstimator
    submission_handler: SubmissionHandler
    recap_producer: RecapProducer
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    log_repository = SupabaseLogRepository(supabase_client)
    saved_item_repository = SupabaseSavedItemRepository(supabase_client)
    recap_repository = SupabaseRecapRepository(supabase_client)

    openai_client = OpenAIMacroClient.create(
        resolved_settings.openai_api_key,
        timeout=resolved_settings.openai_timeout_seconds,
    )
    email_client = HttpxEmailClient.create(
        api_key=resolved_settings.email_api_key,
        sender=resolved_settings.email_sender,
        base_url=resolved_settings.email_base_url,
    )
    forms_client = HttpxGoogleFormsClient.create(
        form_id=resolved_settings.form_id,
        item_id=resolved_settings.form_item_id,
        access_token=resolved_settings.forms_access_token,
    )

    estimator = MacroEstimator(
        client=openai_client, model=resolved_settings.openai_model
    )
    notifications = NotificationService(
        client=email_client, recipient=resolved_settings.notification_recipient
    )
    submission_handler = SubmissionHandler(
        repository=log_repository,
        saved_items=SavedItemService(saved_item_repository),
        estimator=estimator,
        accumulator=DailyAccumulator(
            log_repository, timezone_name=resolved_settings.timezone
        ),
        notifications=notifications,
        forms=FormService(forms_client),
    )
    recap_producer = RecapProducer(
        log_repository=log_repository,
        recap_repository=recap_repository,
        notifications=notifications,
        timezone_name=resolved_settings.timezone,
        date_format=resolved_settings.date_format,
    )

    async def close_resources() -> None:
        await openai_client.close()
        await email_client.close()
        await forms_client.close()

    return AppContainer(
        settings=resolved_settings,
        estimator=estimator,
        submission_handler=submission_handler,
        recap_producer=recap_producer,
        close_resources=close_resources,
    )
