from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from errors import MissingNodeError
from models import LinksConfig, Truck, TruckDescription
from product_data import DEFAULT_SKIPT_SKOOL_URL, DEFAULT_SVG_IMAGE


class NavigationState:
    def __init__(self, submenu_names):
        self.sidebar_open = False
        self.submenus: Dict[str, bool] = {name: False for name in submenu_names}
        self.sidebar_classes: Set[str] = set()
        self.body_classes: Set[str] = set()

    @property
    def open_submenu(self) -> Optional[str]:
        return next((name for name, is_open in self.submenus.items() if is_open), None)

    def toggle_sidebar(self, is_open):
        self.sidebar_open = is_open
        if is_open:
            self.sidebar_classes.add("expanded")
            self.body_classes.add("menu-expanded")
        else:
            self.sidebar_classes.discard("expanded")
            self.body_classes.discard("menu-expanded")
            self.close_all_submenus()

    def toggle_submenu(self, name, is_open):
        if name not in self.submenus:
            raise MissingNodeError(f"submenu:{name}")

        self.submenus[name] = is_open
        if is_open:
            for other in self.submenus:
                if other != name:
                    self.submenus[other] = False
            self.sidebar_classes.add("submenu-expanded")
            self.body_classes.add("submenu-expanded")
        elif self.open_submenu is None:
            self.sidebar_classes.discard("submenu-expanded")
            self.body_classes.discard("submenu-expanded")

    def close_all_submenus(self):
        for name in self.submenus:
            self.submenus[name] = False
        self.sidebar_classes.discard("submenu-expanded")
        self.body_classes.discard("submenu-expanded")


@dataclass
class ModalState:
    truck_id: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.truck_id is not None

    def open(self, truck_id):
        self.truck_id = truck_id

    def close(self):
        self.truck_id = None


def default_links() -> LinksConfig:
    return LinksConfig(skipt_skool=DEFAULT_SKIPT_SKOOL_URL, svg_image=DEFAULT_SVG_IMAGE)


@dataclass
class AppState:
    navigation: NavigationState
    trucks: List[Truck] = field(default_factory=list)
    descriptions: List[TruckDescription] = field(default_factory=list)
    links: LinksConfig = field(default_factory=default_links)
    modal: ModalState = field(default_factory=ModalState)
