"""Tests for the artifact catalogue."""

from __future__ import annotations

import pytest

from genmodule.cli._types import Artifact


class TestArtifact:
    def test_write_order(self) -> None:
        assert [a.filename("Home") for a in Artifact] == [
            "HomeWireframe.swift",
            "HomeDataManager.swift",
            "HomeInteractor.swift",
            "HomePresenter.swift",
            "HomeViewController.swift",
            "HomeViewController.xib",
        ]

    def test_only_layout_has_no_header(self) -> None:
        without_header = [a for a in Artifact if not a.has_header]
        assert without_header == [Artifact.VIEW_CONTROLLER_LAYOUT]

    @pytest.mark.parametrize("artifact", list(Artifact))
    def test_every_artifact_is_described(self, artifact: Artifact) -> None:
        assert artifact.label
        assert artifact.description
        assert artifact.template.rsplit(".", 1)[-1] == artifact.suffix.rsplit(".", 1)[-1]

    def test_empty_module_name_passes_through(self) -> None:
        assert Artifact.WIREFRAME.filename("") == "Wireframe.swift"
