import requests


class MatchAPIError(Exception):
    """Raised when the matcher API answers with a non-200 status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


def request_match(api_url: str, jd_text: str, resume_text: str, timeout: float = 60) -> dict:
    """POST both texts to /match and return the decoded report."""
    r = requests.post(
        f"{api_url.rstrip('/')}/match",
        json={"jd_text": jd_text, "resume_text": resume_text},
        timeout=timeout,
    )
    if r.status_code != 200:
        try:
            detail = r.json().get("detail", r.text)
        except ValueError:
            detail = r.text
        raise MatchAPIError(r.status_code, str(detail))
    return r.json()
