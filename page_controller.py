import asyncio
import logging
from urllib.parse import urlencode

import httpx
from fastapi.templating import Jinja2Templates

from errors import FetchError, MissingNodeError, PageError
from models import SignupResult, find_by_id, parse_descriptions, parse_trucks
from page_state import AppState, NavigationState
from product_data import SECTION_COUNT, japan_imports, nav_menu, spec_fields
from settings import TEMPLATES_DIR

log = logging.getLogger("page_controller")

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

GRID_NODE = "ktrucks-grid"
MODAL_NODE = "ktruck-modal-detail"
ERROR_NODE = "page-error"
NEWSLETTER_NODE = "newsletter-message"


def render(template_name, **context):
    return templates.get_template(template_name).render(**context)


def site_path(path):
    """Turn a page-relative asset path into one the content server can answer."""
    if path.startswith(("http://", "https://", "/")):
        return path
    if path.startswith("./"):
        path = path[2:]
    return "/" + path


# DOCUMENT NODES

class PageView:
    def __init__(self, section_count=SECTION_COUNT):
        self.section_keys = [f"section{n}" for n in range(1, section_count + 1)]
        self.nodes = {ERROR_NODE: "", NEWSLETTER_NODE: ""}
        for key in self.section_keys:
            self.nodes[f"{key}-summary"] = ""
            self.nodes[f"{key}-content"] = ""

    def has(self, node_id):
        return node_id in self.nodes

    def mount(self, node_id, html=""):
        self.nodes.setdefault(node_id, html)

    def get(self, node_id):
        if node_id not in self.nodes:
            raise MissingNodeError(node_id)
        return self.nodes[node_id]

    def set(self, node_id, html):
        if node_id not in self.nodes:
            raise MissingNodeError(node_id)
        self.nodes[node_id] = html


class PageController:
    def __init__(self, client: httpx.AsyncClient, view: PageView = None, state: AppState = None):
        self.client = client
        self.view = view or PageView()
        self.state = state or AppState(navigation=NavigationState([m["name"] for m in nav_menu]))

    # LOADING

    async def fetch_json(self, name):
        try:
            response = await self.client.get(f"/api/data/{name}")
        except httpx.HTTPError as e:
            raise FetchError(name, f"Failed to fetch {name}: {e}")

        if response.is_error:
            raise FetchError(
                name,
                f"Failed to fetch {name}: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise FetchError(name, f"Invalid JSON in {name}: {e}")

    async def load(self):
        results = await asyncio.gather(
            self.fetch_json("links.json"),
            self.fetch_json("ktruckimage.json"),
            self.fetch_json("ktruckdescription.json"),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException) and not isinstance(result, PageError):
                raise result
        links, images, descriptions = results

        try:
            if isinstance(links, PageError):
                log.error("Error loading links.json: %s", links)
            else:
                self.apply_links(links)

            await self.update_sections(japan_imports)
            self.load_trucks(images, descriptions)
        except PageError as e:
            log.error("Page initialisation failed: %s", e)
            self.view.set(ERROR_NODE, render("partials/indicator.html", message=f"Error loading page: {e}"))

    def apply_links(self, data):
        if not isinstance(data, dict):
            log.warning("links.json is not an object, keeping default links")
            return

        overrides = {}
        skipt_skool = data.get("skiptSkool")
        if isinstance(skipt_skool, str) and skipt_skool.strip():
            overrides["skipt_skool"] = skipt_skool
        svg_image = data.get("svgImage")
        if isinstance(svg_image, str) and svg_image.strip():
            overrides["svg_image"] = svg_image

        self.state.links = self.state.links.model_copy(update=overrides)
        log.info("External link set to: %s", self.state.links.skipt_skool)
        log.info("SVG image path set to: %s", self.state.links.svg_image)

    def load_trucks(self, images, descriptions):
        try:
            for result in (images, descriptions):
                if isinstance(result, PageError):
                    raise result
            self.state.trucks = parse_trucks(images)
            self.state.descriptions = parse_descriptions(descriptions)
        except PageError as e:
            log.error("Error loading K Truck data: %s", e)
            if self.view.has(GRID_NODE):
                self.view.set(
                    GRID_NODE,
                    render("partials/indicator.html", message=f"Error loading K Trucks data: {e}"),
                )
            return

        log.info(
            "K Truck data loaded: %d images, %d descriptions",
            len(self.state.trucks),
            len(self.state.descriptions),
        )
        self.populate_grid()

    # SECTIONS

    async def update_sections(self, sections):
        for key in self.view.section_keys:
            section = sections.get(key)
            if section is None:
                continue

            self.view.set(f"{key}-summary", section.title)
            if key == "section1":
                self.mount_ktrucks(section)
            elif key == "section5":
                await self.render_links_section()
            else:
                self.view.set(f"{key}-content", render("partials/section_text.html", content=section.content))

    def mount_ktrucks(self, section):
        # mounted once, later calls leave the grid and modal alone
        if self.view.has(GRID_NODE):
            return
        self.view.set("section1-content", render("partials/section_text.html", content=section.content))
        self.view.mount(GRID_NODE, render("partials/indicator.html", message="Loading K Trucks..."))
        self.view.mount(MODAL_NODE)

    async def check_image(self, path):
        try:
            response = await self.client.get(site_path(path))
        except httpx.HTTPError as e:
            log.error("Failed to load SVG: %s (%s)", path, e)
            return False

        content_type = response.headers.get("content-type", "")
        if response.is_success and content_type.startswith("image/"):
            log.info("SVG loaded successfully: %s", path)
            return True
        log.error("Failed to load SVG: %s (%d %s)", path, response.status_code, content_type)
        return False

    async def render_links_section(self):
        links = self.state.links
        show_logo = await self.check_image(links.svg_image)
        self.view.set(
            "section5-content",
            render("partials/skipt_skool.html", link=links.skipt_skool, svg=links.svg_image, show_logo=show_logo),
        )

    # K TRUCKS GRID + MODAL

    def populate_grid(self):
        if not self.view.has(GRID_NODE):
            log.warning("K Trucks grid is not mounted, skipping")
            return
        self.view.set(
            GRID_NODE,
            render("partials/ktrucks_grid.html", trucks=self.state.trucks, query=self.nav_query()),
        )

    def show_truck_details(self, truck_id):
        if not self.view.has(MODAL_NODE):
            log.warning("K Truck modal is not mounted, skipping")
            return

        truck = find_by_id(self.state.trucks, truck_id)
        description = find_by_id(self.state.descriptions, truck_id)
        if truck is None or description is None:
            log.error("Could not find data for truck ID: %s", truck_id)
            return

        specs = [(label, getattr(description, name)) for name, label in spec_fields]
        self.view.set(
            MODAL_NODE,
            render("partials/truck_detail.html", truck=truck, description=description, specs=specs),
        )
        self.state.modal.open(truck_id)

    def close_modal(self):
        self.state.modal.close()

    def click_modal(self, on_backdrop):
        # clicks inside the modal content do not close it
        if on_backdrop:
            self.close_modal()

    def handle_keydown(self, key):
        if key == "Escape" and self.state.modal.is_open:
            self.close_modal()

    # SIDEBAR NAVIGATION

    def toggle_sidebar(self, is_open):
        self.state.navigation.toggle_sidebar(is_open)
        log.debug("Sidebar %s", "opened" if is_open else "closed")

    def toggle_submenu(self, name, is_open):
        try:
            self.state.navigation.toggle_submenu(name, is_open)
        except MissingNodeError as e:
            log.warning("%s", e)

    def nav_query(self):
        """Query string that reproduces the current sidebar state on the next page load."""
        navigation = self.state.navigation
        params = {}
        if navigation.sidebar_open:
            params["menu"] = "open"
        if navigation.open_submenu:
            params["submenu"] = navigation.open_submenu
        return "?" + urlencode(params) if params else ""

    # NEWSLETTER

    async def submit_signup(self, name, email):
        try:
            response = await self.client.post("/api/signup", json={"name": name, "email": email})
            result = SignupResult.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            log.error("Signup request failed: %s", e)
            result = SignupResult(success=False, message="Signup failed, please try again later")

        self.view.set(NEWSLETTER_NODE, render("partials/signup_message.html", result=result))
        return result

    # OUTPUT

    def render_document(self):
        return render(
            "page.html",
            view=self.view,
            sections=self.view.section_keys,
            nav_menu=nav_menu,
            navigation=self.state.navigation,
            modal=self.state.modal,
            query=self.nav_query(),
            grid_node=GRID_NODE,
            modal_node=MODAL_NODE,
            newsletter_node=NEWSLETTER_NODE,
        )
