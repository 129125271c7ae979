"""
Unit tests for settings validation and tenant resolution.
"""

import pytest
from pydantic import ValidationError

from app.config.settings import Settings
from app.core.domain import MissingTenantException
from app.core.tenancy import TenantContext, get_current_tenant, require_tenant_id, set_tenant_context


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.TENANT_HEADER == "X-Tenant-ID"
        assert settings.DISCOUNT_RULES_PAGE_LIMIT == 20
        assert settings.database_url.startswith("postgresql://")

    def test_log_format_normalized(self):
        assert Settings(_env_file=None, LOG_FORMAT="JSON").LOG_FORMAT == "json"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="verbose")

    def test_invalid_page_limit(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DISCOUNT_RULES_PAGE_LIMIT=0)


@pytest.mark.unit
class TestTenancy:
    def test_require_tenant_id_strips(self):
        assert require_tenant_id("  store-42 ") == "store-42"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_require_tenant_id_rejects_blank(self, value):
        with pytest.raises(MissingTenantException) as exc_info:
            require_tenant_id(value)

        assert exc_info.value.code == "TENANT_REQUIRED"

    def test_context_round_trip(self):
        set_tenant_context(TenantContext(tenant_id="store-42", correlation_id="abc"))
        try:
            assert get_current_tenant() == "store-42"
        finally:
            set_tenant_context(None)

        assert get_current_tenant() is None
