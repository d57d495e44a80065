"""Enums for the generated artifacts."""

from enum import Enum


class Artifact(str, Enum):
    """Files generated for a module, in write order."""

    WIREFRAME = "wireframe"
    DATA_MANAGER = "data-manager"
    INTERACTOR = "interactor"
    PRESENTER = "presenter"
    VIEW_CONTROLLER = "view-controller"
    VIEW_CONTROLLER_LAYOUT = "view-controller-layout"

    @property
    def suffix(self) -> str:
        suffixes: dict[Artifact, str] = {
            Artifact.WIREFRAME: "Wireframe.swift",
            Artifact.DATA_MANAGER: "DataManager.swift",
            Artifact.INTERACTOR: "Interactor.swift",
            Artifact.PRESENTER: "Presenter.swift",
            Artifact.VIEW_CONTROLLER: "ViewController.swift",
            Artifact.VIEW_CONTROLLER_LAYOUT: "ViewController.xib",
        }
        return suffixes[self]

    @property
    def template(self) -> str:
        templates: dict[Artifact, str] = {
            Artifact.WIREFRAME: "wireframe.swift",
            Artifact.DATA_MANAGER: "data_manager.swift",
            Artifact.INTERACTOR: "interactor.swift",
            Artifact.PRESENTER: "presenter.swift",
            Artifact.VIEW_CONTROLLER: "view_controller.swift",
            Artifact.VIEW_CONTROLLER_LAYOUT: "view_controller.xib",
        }
        return templates[self]

    @property
    def label(self) -> str:
        labels: dict[Artifact, str] = {
            Artifact.WIREFRAME: "Wireframe",
            Artifact.DATA_MANAGER: "Data Manager",
            Artifact.INTERACTOR: "Interactor",
            Artifact.PRESENTER: "Presenter",
            Artifact.VIEW_CONTROLLER: "View Controller",
            Artifact.VIEW_CONTROLLER_LAYOUT: "View Controller Layout",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[Artifact, str] = {
            Artifact.WIREFRAME: "router that wires the module and exposes its view controller",
            Artifact.DATA_MANAGER: "data manager protocol",
            Artifact.INTERACTOR: "business logic holder",
            Artifact.PRESENTER: "mediator between interactor and view",
            Artifact.VIEW_CONTROLLER: "UIViewController subclass",
            Artifact.VIEW_CONTROLLER_LAYOUT: "Interface Builder layout",
        }
        return descriptions[self]

    @property
    def has_header(self) -> bool:
        return self is not Artifact.VIEW_CONTROLLER_LAYOUT

    def filename(self, module_name: str) -> str:
        return f"{module_name}{self.suffix}"
