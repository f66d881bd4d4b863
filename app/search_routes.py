from typing import Optional
from urllib.parse import quote

from fastapi import Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from .app_context import templates
from Security.audit_trail import audit
from Security.input_validation import check_search_term


# Same reserved set as JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _redirect_home() -> RedirectResponse:
    return RedirectResponse("/", status_code=302)


def register_search_routes(app):
    @app.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
    async def index_page(request: Request):
        return templates.TemplateResponse(request=request, name="search/index.html")

    @app.post("/search")
    async def search_submit(term: Optional[str] = Form(None)):
        if not term:
            audit("search_empty")
            return PlainTextResponse("Empty search field", status_code=400)

        verdict = check_search_term(term)
        if not verdict.accepted:
            # Rejections stay silent for the client.
            audit("search_rejected", details=f"reason={verdict.reason}")
            return _redirect_home()

        audit("search_accepted", details=f"length={len(term)}")
        return RedirectResponse(f"/search?term={encode_uri_component(term)}", status_code=302)

    @app.api_route("/search", methods=["GET", "HEAD"], response_class=HTMLResponse)
    async def search_results(request: Request):
        """
        Render the submitted term.
        The term is read straight from the query string: it is not re-validated
        and is rendered without escaping, so a direct GET skips every filter.
        A repeated parameter is rendered as its values joined with commas.
        """
        term = ",".join(request.query_params.getlist("term"))
        if not term:
            return _redirect_home()
        return templates.TemplateResponse(
            request=request,
            name="search/results.html",
            context={"term": term},
        )
