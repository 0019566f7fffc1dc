"""Tests for platform registry"""

import pytest

from src.webhook_push.errors import UnknownPlatformError
from src.webhook_push.platforms import (
    DEFAULT_PLATFORM,
    ENV_EXTRAS,
    ENV_KEYS,
    PLATFORM_REGISTRY,
    PLATFORMS,
    STATUS_STYLES,
    Platform,
    PushOptions,
    StatusKind,
    StatusStyle,
    get_platform_spec,
    status_text,
    style_for,
)
from src.webhook_push.platforms.feishu import FeishuCardBuilder


class TestRegistry:
    """Tests for the platform registry table"""

    def test_every_platform_registered_once(self):
        assert set(PLATFORM_REGISTRY) == set(Platform)
        assert len(PLATFORM_REGISTRY) == 5

    @pytest.mark.parametrize("platform", list(Platform))
    def test_spec_is_complete(self, platform):
        spec = PLATFORM_REGISTRY[platform]
        assert spec.platform is platform
        assert spec.env_key.startswith("WEBHOOK_")
        assert callable(spec.build_url)
        assert callable(spec.format_message)
        assert callable(spec.format_progress)

    def test_only_telegram_has_extra_env_key(self):
        extras = {p for p, spec in PLATFORM_REGISTRY.items() if spec.extra_env_key}
        assert extras == {Platform.TELEGRAM}
        assert ENV_EXTRAS == {"telegram": "WEBHOOK_TELEGRAM_CHAT_ID"}

    def test_env_keys(self):
        assert dict(ENV_KEYS) == {
            "wecom": "WEBHOOK_WECOM_KEY",
            "dingtalk": "WEBHOOK_DINGTALK_TOKEN",
            "feishu": "WEBHOOK_FEISHU_TOKEN",
            "slack": "WEBHOOK_SLACK_URL",
            "telegram": "WEBHOOK_TELEGRAM_TOKEN",
        }

    def test_constants_are_read_only(self):
        with pytest.raises(TypeError):
            ENV_KEYS["discord"] = "WEBHOOK_DISCORD_URL"
        with pytest.raises(TypeError):
            PLATFORM_REGISTRY[Platform.WECOM] = None
        with pytest.raises(TypeError):
            STATUS_STYLES[StatusKind.COMPLETED] = StatusStyle("black", "X", "x")
        assert style_for("completed").emoji == "✅"

    def test_platform_order_and_default(self):
        assert PLATFORMS == ("wecom", "dingtalk", "feishu", "slack", "telegram")
        assert DEFAULT_PLATFORM is Platform.WECOM

    def test_unknown_platform(self):
        with pytest.raises(UnknownPlatformError) as exc_info:
            get_platform_spec("discord")

        message = str(exc_info.value)
        assert "discord" in message
        for platform in PLATFORMS:
            assert platform in message

    def test_lookup_by_string_and_enum(self):
        assert get_platform_spec("slack") is get_platform_spec(Platform.SLACK)


class TestUrlBuilders:
    """Tests for webhook URL construction"""

    def test_wecom(self):
        url = get_platform_spec("wecom").build_url("abc", None)
        assert url == "https://qyapi.weixin.qq.com/cgi-bin/webhook/send?key=abc"

    def test_dingtalk(self):
        url = get_platform_spec("dingtalk").build_url("tok", None)
        assert url == "https://oapi.dingtalk.com/robot/send?access_token=tok"

    def test_feishu(self):
        url = get_platform_spec("feishu").build_url("hook-id", None)
        assert url == "https://open.feishu.cn/open-apis/bot/v2/hook/hook-id"

    def test_slack_uses_credential_as_url(self):
        full_url = "https://hooks.slack.com/services/T000/B000/XXXX"
        assert get_platform_spec("slack").build_url(full_url, None) == full_url

    def test_telegram(self):
        url = get_platform_spec("telegram").build_url("123:ABC", "-100")
        assert url == "https://api.telegram.org/bot123:ABC/sendMessage?chat_id=-100"


class TestMessageFormatters:
    """Tests for per-platform payloads"""

    def test_wecom_markdown(self):
        payload = get_platform_spec("wecom").format_message("hello", PushOptions())
        assert payload == {"msgtype": "markdown", "markdown": {"content": "hello"}}

    def test_dingtalk_default_title(self):
        payload = get_platform_spec("dingtalk").format_message("hello", PushOptions())
        assert payload == {
            "msgtype": "markdown",
            "markdown": {"title": "Notification", "text": "hello"},
        }

    def test_dingtalk_custom_title(self):
        payload = get_platform_spec("dingtalk").format_message(
            "hello", PushOptions(title="CI/CD Update")
        )
        assert payload["markdown"]["title"] == "CI/CD Update"

    def test_feishu_card(self):
        payload = get_platform_spec("feishu").format_message(
            "**hi**", PushOptions(title="Deploy", color="green")
        )
        assert payload["msg_type"] == "interactive"
        card = payload["card"]
        assert card["header"]["title"] == {"tag": "plain_text", "content": "Deploy"}
        assert card["header"]["template"] == "green"
        assert card["elements"] == [{"tag": "markdown", "content": "**hi**"}]

    def test_feishu_card_defaults(self):
        payload = get_platform_spec("feishu").format_message("x", PushOptions())
        assert payload["card"]["header"]["title"]["content"] == "Notification"
        assert payload["card"]["header"]["template"] == "blue"

    def test_slack_blocks(self):
        payload = get_platform_spec("slack").format_message("hello", PushOptions())
        assert payload == {
            "blocks": [
                {"type": "section", "text": {"type": "mrkdwn", "text": "hello"}},
            ]
        }

    def test_telegram(self):
        payload = get_platform_spec("telegram").format_message("hello", PushOptions())
        assert payload == {"text": "hello", "parse_mode": "Markdown"}

    def test_card_builder_header(self):
        header = FeishuCardBuilder.create_header("T", "red")
        assert header["template"] == "red"


class TestStatusStyles:
    """Tests for status style table"""

    def test_every_status_has_style(self):
        assert set(STATUS_STYLES) == set(StatusKind)

    def test_style_for_known_status(self):
        style = style_for("completed")
        assert style.emoji == "✅"
        assert style.color == "green"
        assert style.accent == "info"

    def test_unknown_status_falls_back_to_in_progress(self):
        assert style_for("deploying") == STATUS_STYLES[StatusKind.IN_PROGRESS]

    def test_style_for_accepts_enum(self):
        assert style_for(StatusKind.FAILED) == STATUS_STYLES[StatusKind.FAILED]

    def test_status_text(self):
        assert status_text(StatusKind.COMPLETED) == "completed"
        assert status_text("deploying") == "deploying"
