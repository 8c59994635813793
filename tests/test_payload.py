import pytest

from models.content import ContentType, FieldSet, URL_TYPES
from utils.payload import PAYLOAD_BUILDERS, build_payload, encode_uri_component, resolve_fields


@pytest.mark.parametrize("ctype", URL_TYPES)
def test_url_types_echo_url(ctype):
    url = "https://example.org/a b?x=1&y=2"
    assert build_payload(ctype, {"url": url, "text": "ignored"}) == url
    assert build_payload(ctype, {}) == ""


def test_text_verbatim():
    assert build_payload(ContentType.TEXT, {"text": "Hallo; Welt\nZeile 2"}) == "Hallo; Welt\nZeile 2"


def test_email_percent_encodes_subject_and_body():
    fields = {"email": "a@b.com", "subject": "Hi there", "body": "Hello & welcome"}
    assert build_payload(ContentType.EMAIL, fields) == (
        "mailto:a@b.com?subject=Hi%20there&body=Hello%20%26%20welcome"
    )


def test_email_address_not_encoded():
    assert build_payload(ContentType.EMAIL, {"email": "a+b@c.de"}) == "mailto:a+b@c.de?subject=&body="


def test_phone():
    assert build_payload(ContentType.PHONE, {"phone": "+49 (30) 123"}) == "tel:+49 (30) 123"


def test_sms_field_order():
    fields = {"phone": "+49 170 1", "text": "Bin da: gleich"}
    assert build_payload(ContentType.SMS, fields) == "SMSTO:+49 170 1:Bin da: gleich"
    assert build_payload(ContentType.SMS, {}) == "SMSTO::"


def test_whatsapp_keeps_only_digits():
    fields = {"phone": "+55 (11) 99999-9999", "text": "Oi"}
    assert build_payload(ContentType.WHATSAPP, fields) == "https://wa.me/5511999999999?text=Oi"


def test_whatsapp_encodes_text():
    fields = {"phone": "0049-30", "text": "Guten Tag & ciao!"}
    assert build_payload(ContentType.WHATSAPP, fields) == "https://wa.me/004930?text=Guten%20Tag%20%26%20ciao!"


def test_wifi_defaults_to_wpa():
    fields = {"ssid": "Home", "password": "secret"}
    assert build_payload(ContentType.WIFI, fields) == "WIFI:T:WPA;S:Home;P:secret;;"


def test_wifi_uses_given_encryption_and_no_escaping():
    fields = {"ssid": "My;Net", "password": "p:w", "encryption": "nopass"}
    assert build_payload(ContentType.WIFI, fields) == "WIFI:T:nopass;S:My;Net;P:p:w;;"


def test_vcard_layout():
    fields = {
        "firstName": "Max",
        "lastName": "Mustermann",
        "organization": "Muster GmbH",
        "phone": "+49 30 1",
        "email": "max@example.com",
    }
    assert build_payload(ContentType.VCARD, fields) == (
        "BEGIN:VCARD\n"
        "VERSION:3.0\n"
        "N:Mustermann;Max\n"
        "FN:Max Mustermann\n"
        "ORG:Muster GmbH\n"
        "TEL:+49 30 1\n"
        "EMAIL:max@example.com\n"
        "END:VCARD"
    )


def test_vcard_does_not_escape_delimiters():
    payload = build_payload(ContentType.VCARD, {"organization": "A;B, C\nD"})
    assert "ORG:A;B, C\nD\n" in payload


def test_vcard_empty_fields():
    assert build_payload(ContentType.VCARD, {}).split("\n") == [
        "BEGIN:VCARD",
        "VERSION:3.0",
        "N:;",
        "FN: ",
        "ORG:",
        "TEL:",
        "EMAIL:",
        "END:VCARD",
    ]


def test_event_strips_dashes_and_colons():
    fields = {
        "eventTitle": "Silvester",
        "eventLocation": "Berlin, Tor",
        "eventStart": "2023-12-31T19:00:00",
        "eventEnd": "2024-01-01T02:30:00",
    }
    assert build_payload(ContentType.EVENT, fields) == (
        "BEGIN:VEVENT\n"
        "SUMMARY:Silvester\n"
        "LOCATION:Berlin, Tor\n"
        "DTSTART:20231231T190000\n"
        "DTEND:20240101T023000\n"
        "END:VEVENT"
    )


def test_event_start_only():
    lines = build_payload(ContentType.EVENT, {"eventStart": "2023-12-31T19:00:00"}).split("\n")
    assert "DTSTART:20231231T190000" in lines
    assert "DTEND:" in lines


@pytest.mark.parametrize("ctype", [None, "", "geo", "LINK", 42])
def test_unknown_type_gives_empty_string(ctype):
    assert build_payload(ctype, {"url": "https://x", "text": "t"}) == ""


def test_string_tags_are_accepted():
    assert build_payload("wifi", {"ssid": "S"}) == "WIFI:T:WPA;S:S;P:;;"


def test_builder_table_covers_every_type():
    assert set(PAYLOAD_BUILDERS) == set(ContentType)


def test_idempotent_and_does_not_mutate_input():
    fields = {"email": "a@b.com", "subject": "x y"}
    snapshot = dict(fields)
    first = build_payload(ContentType.EMAIL, fields)
    assert build_payload(ContentType.EMAIL, fields) == first
    assert fields == snapshot


def test_fieldset_model_and_none_values():
    fs = FieldSet(ssid="Cafe", password=None)
    assert build_payload(ContentType.WIFI, fs) == "WIFI:T:WPA;S:Cafe;P:;;"
    assert build_payload(ContentType.WIFI, None) == "WIFI:T:WPA;S:;P:;;"


def test_resolve_fields_defaults_and_ignores_unknown():
    resolved = resolve_fields({"phone": 123, "bogus": "x", "text": None})
    assert resolved["phone"] == "123"
    assert resolved["text"] == ""
    assert "bogus" not in resolved
    assert all(value == "" for key, value in resolved.items() if key != "phone")


def test_encode_uri_component_matches_js():
    assert encode_uri_component("a b&c=d/e?f#g") == "a%20b%26c%3Dd%2Fe%3Ff%23g"
    assert encode_uri_component("-_.!~*'()") == "-_.!~*'()"
    assert encode_uri_component("Grüße") == "Gr%C3%BC%C3%9Fe"
