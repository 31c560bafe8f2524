"""Property-based tests for recipient, language, and markup rules.

Uses hypothesis to check the rules hold for arbitrary addresses, language
codes and bodies (escaped markup included), not just the fixtures in
``conftest``.
"""

from __future__ import annotations

import re

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from message_notify.domain.behaviors import resolve_language, resolve_recipient, strip_markup
from message_notify.domain.errors import UnknownLanguageError
from message_notify.domain.models import LANGUAGE_NONE, Account, Language, Message, NotifierOptions

ENGLISH = Language(code="en", name="English")
LANGUAGES = {
    "en": ENGLISH,
    "fr": Language(code="fr", name="French"),
    "de": Language(code="de", name="German"),
}

addresses = st.emails()
codes = st.sampled_from(sorted(LANGUAGES))
unknown_codes = st.from_regex(r"[a-z]{2,3}(-[A-Z]{2})?", fullmatch=True).filter(
    lambda code: code not in LANGUAGES and code != LANGUAGE_NONE
)
plain_text = st.text(alphabet=st.characters(blacklist_characters="<>&\r", blacklist_categories=("Cs", "Cc")))
markup_text = st.lists(
    st.one_of(
        st.sampled_from(["<", ">", "&", "/", ";", "&lt;", "&gt;", "&amp;", "&#60;", "<b>", "</b>", "<script>", " "]),
        st.text(max_size=4),
    ),
    max_size=20,
).map("".join)

#: A `<` followed by a non-space and closed by `>`: what a mail client may render as a tag.
TAG_SHAPED = re.compile(r"<[^\s>][^>]*>")


# ======================== resolve_recipient ========================


@pytest.mark.os_agnostic
@given(override=addresses, account_mail=st.one_of(st.just(""), addresses))
def test_options_mail_always_wins(override: str, account_mail: str) -> None:
    account = Account(uid=1, mail=account_mail)

    assert resolve_recipient(NotifierOptions(mail=override), account) == override


@pytest.mark.os_agnostic
@given(account_mail=addresses, unset=st.sampled_from([None, ""]))
def test_account_mail_used_when_options_unset(account_mail: str, unset: str | None) -> None:
    assert resolve_recipient(NotifierOptions(mail=unset), Account(uid=1, mail=account_mail)) == account_mail


# ======================== resolve_language ========================


@pytest.mark.os_agnostic
@given(account_code=codes, message_code=st.one_of(codes, unknown_codes))
def test_account_language_wins_without_override(account_code: str, message_code: str) -> None:
    chosen = resolve_language(
        message=Message(type="t", uid=1, language=message_code),
        account=Account(uid=1, language=account_code),
        options=NotifierOptions(),
        languages=LANGUAGES,
        default=ENGLISH,
    )

    assert chosen is LANGUAGES[account_code]


@pytest.mark.os_agnostic
@given(account_code=st.sampled_from(["", LANGUAGE_NONE]), message_code=st.one_of(codes, unknown_codes))
def test_default_used_when_account_has_no_language(account_code: str, message_code: str) -> None:
    chosen = resolve_language(
        message=Message(type="t", uid=1, language=message_code),
        account=Account(uid=1, language=account_code),
        options=NotifierOptions(),
        languages=LANGUAGES,
        default=ENGLISH,
    )

    assert chosen is ENGLISH


@pytest.mark.os_agnostic
@given(account_code=st.one_of(codes, st.just(LANGUAGE_NONE)), message_code=codes)
def test_override_uses_message_language(account_code: str, message_code: str) -> None:
    chosen = resolve_language(
        message=Message(type="t", uid=1, language=message_code),
        account=Account(uid=1, language=account_code),
        options=NotifierOptions(language_override=True),
        languages=LANGUAGES,
        default=ENGLISH,
    )

    assert chosen is LANGUAGES[message_code]


@pytest.mark.os_agnostic
@given(message_code=unknown_codes)
@settings(max_examples=50)
def test_override_with_unknown_message_language_raises(message_code: str) -> None:
    with pytest.raises(UnknownLanguageError) as exc:
        resolve_language(
            message=Message(type="t", uid=1, language=message_code),
            account=Account(uid=1, language="fr"),
            options=NotifierOptions(language_override=True),
            languages=LANGUAGES,
            default=ENGLISH,
        )

    assert exc.value.code == message_code


# ======================== strip_markup ========================


@pytest.mark.os_agnostic
@given(text=plain_text, tag=st.sampled_from(["p", "b", "em", "div", "span", "a"]))
@settings(max_examples=200)
def test_strip_markup_keeps_text_and_drops_tags(text: str, tag: str) -> None:
    stripped = strip_markup(f"<{tag}>{text}</{tag}>")

    assert stripped == text
    assert f"<{tag}>" not in stripped


@pytest.mark.os_agnostic
@given(text=plain_text)
def test_strip_markup_is_idempotent_on_plain_text(text: str) -> None:
    assert strip_markup(strip_markup(text)) == strip_markup(text)


@pytest.mark.os_agnostic
@given(text=markup_text)
@settings(max_examples=300, deadline=None)
def test_strip_markup_output_has_no_tags_even_when_escaped(text: str) -> None:
    stripped = strip_markup(text)

    assert not TAG_SHAPED.search(stripped)


@pytest.mark.os_agnostic
@given(text=markup_text)
@settings(max_examples=200, deadline=None)
def test_strip_markup_is_idempotent_on_markup(text: str) -> None:
    once = strip_markup(text)

    assert strip_markup(once) == once
