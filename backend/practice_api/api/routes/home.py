"""Home Pages — GET / for each service.

Invariants:
    - products home lists every products route plus an example body (HTML)
    - users home is a plain-text greeting
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse

products_home_router = APIRouter(tags=["home"])
users_home_router = APIRouter(tags=["home"])

PRODUCTS_HOME_HTML = """\
<h1>Product API</h1>
<p>Available routes:</p>
<ul>
    <li><b>GET /products</b> - list all products</li>
    <li><b>GET /products/:id</b> - product by id</li>
    <li><b>POST /products</b> - create a product (JSON body)</li>
    <li><b>PUT /products/:id</b> - replace a product</li>
    <li><b>PATCH /products/:id</b> - partially update a product</li>
    <li><b>DELETE /products/:id</b> - delete a product</li>
</ul>
<p>Example JSON for POST/PUT/PATCH:</p>
<pre>{
    "name": "Tablet",
    "price": 30000
}</pre>
"""


@products_home_router.get("/", response_class=HTMLResponse)
async def products_home():
    return PRODUCTS_HOME_HTML


@users_home_router.get("/", response_class=PlainTextResponse)
async def users_home():
    return "Home page"
