# =============================================================================
# app/routers/home.py - Product Page
# =============================================================================
# GET / lists every product under the banner image.
#
# The two lookups run one after the other: the banner URL is only signed
# once the products query has succeeded. Failures propagate as
# DatabaseError / AssetLinkError and are turned into plain-text 500s by
# the handlers registered in main.py.
# =============================================================================

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.dependencies import AssetServiceDep, ProductServiceDep
from app.templating import templates

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    products: ProductServiceDep,
    assets: AssetServiceDep,
):
    """
    Render the product page.

    Queries the products table, then signs a fresh banner URL.
    Nothing is cached between requests.
    """
    records = await products.list_products()
    banner = await assets.issue_url()

    return templates.TemplateResponse(
        request,
        "index.html",
        {"products": records, "banner_url": banner.url},
    )
