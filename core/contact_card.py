"""
Contact card export for provisioned agents
"""

import re
from urllib.parse import quote

VCARD_NOTE = "Created with VAPI Agent Creator"


def _escape(value: str) -> str:
    # vCard text values: backslash first, then separators and newlines
    value = value.replace("\\", "\\\\").replace(",", "\\,").replace(";", "\\;")
    return value.replace("\r\n", "\\n").replace("\r", "\\n").replace("\n", "\\n")


def build_vcard(name: str, phone_number: str) -> str:
    """vCard 3.0 text naming the agent and its phone number"""
    lines = [
        "BEGIN:VCARD",
        "VERSION:3.0",
        f"FN:{_escape(name)}",
        f"TEL;TYPE=CELL:{_escape(phone_number)}",
        f"NOTE:{VCARD_NOTE}",
        "END:VCARD",
    ]
    return "\r\n".join(lines) + "\r\n"


def vcard_filename(name: str) -> str:
    return re.sub(r"\s+", "_", name) + ".vcf"


def content_disposition(name: str) -> str:
    """Attachment header for the card; RFC 5987 form when the filename is not plain ASCII"""
    filename = vcard_filename(name)
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'
