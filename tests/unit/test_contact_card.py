"""Unit tests for contact card export."""

from core.contact_card import build_vcard, content_disposition, vcard_filename


def test_build_vcard():
    card = build_vcard("Coffee Bot", "+14155551234")

    assert card.splitlines() == [
        "BEGIN:VCARD",
        "VERSION:3.0",
        "FN:Coffee Bot",
        "TEL;TYPE=CELL:+14155551234",
        "NOTE:Created with VAPI Agent Creator",
        "END:VCARD",
    ]
    assert card.endswith("END:VCARD\r\n")


def test_build_vcard_escapes_name():
    card = build_vcard("Bean, Brew; Co\\", "+14155551234")

    assert "FN:Bean\\, Brew\\; Co\\\\\r\n" in card


def test_vcard_filename():
    assert vcard_filename("Coffee Bot") == "Coffee_Bot.vcf"
    assert vcard_filename("My  Agent\tOne") == "My_Agent_One.vcf"


def test_build_vcard_keeps_phone_number_on_one_line():
    card = build_vcard("Coffee Bot", "+14155551234\r\nEMAIL:attacker@example.com")

    lines = card.splitlines()
    assert len(lines) == 6
    assert lines[3] == "TEL;TYPE=CELL:+14155551234\\nEMAIL:attacker@example.com"
    assert not any(line.startswith("EMAIL") for line in lines)


def test_content_disposition_ascii_name():
    assert content_disposition("Coffee Bot") == 'attachment; filename="Coffee_Bot.vcf"'


def test_content_disposition_non_ascii_name():
    assert content_disposition("Café Bot") == "attachment; filename*=utf-8''Caf%C3%A9_Bot.vcf"


def test_content_disposition_quoted_name():
    assert content_disposition('Coffee "Bot"') == "attachment; filename*=utf-8''Coffee_%22Bot%22.vcf"
