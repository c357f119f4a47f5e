"""Fake requests objects and XML builders shared by the tests."""

import io

from requests.structures import CaseInsensitiveDict

XML_HEADERS = {"Content-Type": "application/xml"}


class FakeRaw(io.BytesIO):
    decode_content = False


class FakeResponse:
    """Stands in for requests.Response in the client tests."""

    def __init__(self, status_code=200, text="", content=b"", headers=None, reason=""):
        self.status_code = status_code
        self.text = text
        self.reason = reason
        self.headers = CaseInsensitiveDict(headers or {})
        self.raw = FakeRaw(content)
        self.closed = False

    @property
    def ok(self):
        return self.status_code < 400

    def close(self):
        self.closed = True


class FakeSession:
    """
    Replays canned responses. `get` and `post` are either lists of responses
    (or exceptions) consumed in order, or callables building the response
    from the request.
    """

    def __init__(self, get=None, post=None):
        self._get = get if callable(get) else list(get or [])
        self._post = post if callable(post) else list(post or [])
        self.calls = []
        self.uploads = []

    def _answer(self, source, url, kwargs):
        if callable(source):
            answer = source(url, **kwargs)
        else:
            answer = source.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer

    def get(self, url, **kwargs):
        self.calls.append(("GET", url, kwargs))
        return self._answer(self._get, url, kwargs)

    def post(self, url, **kwargs):
        self.calls.append(("POST", url, kwargs))
        payload = kwargs["files"]["file"]
        self.uploads.append((payload.name, payload.read().decode()))
        return self._answer(self._post, url, kwargs)

    def count(self, method):
        return sum(1 for call in self.calls if call[0] == method)


def redirect(location, status=302, retry_after=None):
    headers = {"Location": location}
    if retry_after is not None:
        headers["Retry-After"] = str(retry_after)
    return FakeResponse(status, headers=headers)


def still_running(retry_after=5):
    return FakeResponse(200, headers={"Retry-After": str(retry_after)})


def export(content):
    return FakeResponse(200, content=content, headers=XML_HEADERS)


def entry_xml(accession, name="Uncharacterized protein", organism="Homo sapiens", sequence="MKV"):
    return (
        f'<entry dataset="Swiss-Prot" created="2000-05-30" modified="2023-11-08" version="3">'
        f"<accession>{accession}</accession>"
        f"<protein><recommendedName><fullName>{name}</fullName></recommendedName></protein>"
        f'<organism><name type="scientific">{organism}</name></organism>'
        f'<sequence length="{len(sequence)}">{sequence}</sequence>'
        f"</entry>"
    )


def uniprot_document(entries):
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<uniprot xmlns="http://uniprot.org/uniprot">'
        + "".join(entries)
        + "<copyright>Copyrighted by the UniProt Consortium</copyright>"
        "</uniprot>"
    ).encode()
