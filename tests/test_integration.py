"""集成测试。

测试库接口和 MCP 工具。
"""

from pathlib import Path

import pytest

from py_webp_optimizer import ImageOptimizer, optimize_directory
from py_webp_optimizer.exceptions import ArgumentError, FilesystemError
from tests.conftest import make_image, make_svg


class TestImageOptimizer:
    """优化器接口测试"""

    def test_run(self, input_dir: Path, output_dir: Path):
        make_image(input_dir / "photo.jpg", (800, 600))
        make_svg(input_dir / "icons" / "logo.svg")
        (input_dir / "notes.md").write_text("# notes")

        optimizer = ImageOptimizer(input_dir=input_dir, output_dir=output_dir)
        summary = optimizer.run()

        assert summary.get_total_count() == 2
        assert summary.get_success_count() == 2
        assert (output_dir / "photo.webp").exists()
        assert (output_dir / "logo.webp").exists()

    def test_separate_configs(self, input_dir: Path, temp_dir: Path):
        """同一进程中不同配置互不影响"""
        make_image(input_dir / "photo.png", (400, 400))
        small = ImageOptimizer(
            input_dir=input_dir, output_dir=temp_dir / "small", resize={"width": 100}
        )
        full = ImageOptimizer(input_dir=input_dir, output_dir=temp_dir / "full")

        small_outcome = small.process_image(input_dir / "photo.png")
        full_outcome = full.process_image(input_dir / "photo.png")

        assert small_outcome.final_dimensions == (100, 100)
        assert full_outcome.final_dimensions == (400, 400)

    def test_update_config(self, input_dir: Path):
        optimizer = ImageOptimizer(input_dir=input_dir)
        config = optimizer.update_config(quality=55)

        assert config.quality == 55
        assert optimizer.config.input_dir == input_dir

    def test_invalid_override(self):
        with pytest.raises(ArgumentError):
            ImageOptimizer(unknown=True)

    def test_run_setup_error(self, input_dir: Path, temp_dir: Path):
        blocker = temp_dir / "blocker"
        blocker.write_text("x")

        with pytest.raises(FilesystemError):
            ImageOptimizer(input_dir=input_dir, output_dir=blocker / "out").run()

    def test_optimize_directory(self, input_dir: Path, output_dir: Path):
        make_image(input_dir / "a.gif", (60, 30))

        summary = optimize_directory(input_dir, output_dir, quality=90)

        assert summary.get_success_count() == 1
        assert summary.outcomes[0].quality_used == 90


class TestMCPServer:
    """MCP服务器功能测试"""

    def test_mcp_server_imports(self):
        from py_webp_optimizer.mcp_server import mcp

        assert mcp is not None

    def test_mcp_tool_registered(self):
        from py_webp_optimizer.mcp_server import optimize_images

        assert hasattr(optimize_images, "name")
        assert optimize_images.name == "optimize_images"

    def test_optimize_images_response(self, input_dir: Path, output_dir: Path):
        from py_webp_optimizer.mcp_server import optimize_images_response

        make_image(input_dir / "photo.png", (300, 150))

        response = optimize_images_response(
            str(input_dir), str(output_dir), quality=70, max_width=100
        )

        assert response["success"]
        assert response["result"]["successful_files"] == 1
        assert response["result"]["results"][0]["output_path"].endswith("photo.webp")

    def test_missing_input_dir(self, temp_dir: Path):
        from py_webp_optimizer.mcp_server import optimize_images_response

        response = optimize_images_response(str(temp_dir / "missing"))

        assert not response["success"]
        assert response["error_type"] == "file"

    def test_invalid_dimensions(self, input_dir: Path, output_dir: Path):
        from py_webp_optimizer.mcp_server import optimize_images_response

        response = optimize_images_response(
            str(input_dir), str(output_dir), max_width=-1
        )

        assert not response["success"]
        assert response["error_type"] == "validation"
