"""批量处理测试。

测试文件查找、目录准备和整批转换。
"""

import logging
from pathlib import Path

import pytest
from PIL import Image

from py_webp_optimizer.engine.batch import process_all_images, summarize
from py_webp_optimizer.exceptions import FilesystemError
from py_webp_optimizer.utils.file_helpers import ensure_directories, find_files
from tests.conftest import create_config, make_image, make_svg


class TestFindFiles:
    """文件查找测试"""

    def test_recursive_sorted(self, input_dir: Path):
        (input_dir / "b.txt").write_text("x")
        make_image(input_dir / "sub" / "a.png")
        make_image(input_dir / "a.jpg")

        files = find_files(input_dir)

        assert [f.relative_to(input_dir.resolve()).as_posix() for f in files] == [
            "a.jpg",
            "b.txt",
            "sub/a.png",
        ]
        assert all(f.is_absolute() for f in files)

    def test_empty_directory(self, input_dir: Path):
        assert find_files(input_dir) == []

    def test_missing_directory(self, temp_dir: Path):
        assert find_files(temp_dir / "nope") == []

    def test_exclude_dirs(self, input_dir: Path):
        make_image(input_dir / "keep.png")
        make_image(input_dir / "out" / "old.png")

        files = find_files(input_dir, exclude_dirs=[input_dir / "out"])

        assert [f.name for f in files] == ["keep.png"]


class TestEnsureDirectories:
    """目录准备测试"""

    def test_creates_nested(self, temp_dir: Path):
        config = create_config(
            input_dir=temp_dir / "in" / "deep", output_dir=temp_dir / "out" / "deep"
        )

        ensure_directories(config)
        ensure_directories(config)

        assert config.input_dir.is_dir()
        assert config.output_dir.is_dir()

    def test_blocked_by_file(self, temp_dir: Path):
        """同名文件阻止目录创建时抛出 FilesystemError"""
        blocker = temp_dir / "blocker"
        blocker.write_text("x")
        config = create_config(input_dir=temp_dir / "in", output_dir=blocker / "out")

        with pytest.raises(FilesystemError):
            ensure_directories(config)


class TestProcessAllImages:
    """整批转换测试"""

    def test_photo_and_icon(self, input_dir: Path, output_dir: Path):
        """大图缩小到边界内，小图保持原尺寸"""
        make_image(input_dir / "photo.jpg", (2000, 1000))
        make_image(input_dir / "icon.png", (50, 50))
        config = create_config(
            input_dir=input_dir,
            output_dir=output_dir,
            quality=90,
            resize={"width": 500},
        )
        ensure_directories(config)

        outcomes = process_all_images(config)
        summary = summarize(outcomes, config.output_dir)

        assert summary.get_success_count() == 2
        assert summary.get_failure_count() == 0
        assert all(o.quality_used == 90 for o in outcomes)
        with Image.open(output_dir / "photo.webp") as img:
            assert img.size == (500, 250)
        with Image.open(output_dir / "icon.webp") as img:
            assert img.size == (50, 50)

    def test_empty_input(self, input_dir: Path, output_dir: Path):
        """没有文件时返回空列表，不写输出目录"""
        config = create_config(input_dir=input_dir, output_dir=output_dir)
        ensure_directories(config)

        outcomes = process_all_images(config)

        assert outcomes == []
        assert list(output_dir.iterdir()) == []

    def test_corrupt_file_counted_as_failure(self, input_dir: Path, output_dir: Path):
        (input_dir / "broken.jpg").write_bytes(b"\xff\xd8garbage")
        config = create_config(input_dir=input_dir, output_dir=output_dir)

        summary = summarize(process_all_images(config), output_dir)

        assert summary.get_success_count() == 0
        assert summary.get_failure_count() == 1

    def test_failure_does_not_stop_batch(self, input_dir: Path, output_dir: Path):
        (input_dir / "a_broken.png").write_bytes(b"nope")
        make_image(input_dir / "b_good.png")
        config = create_config(input_dir=input_dir, output_dir=output_dir)

        outcomes = process_all_images(config)

        assert [o.success for o in outcomes] == [False, True]
        assert (output_dir / "b_good.webp").exists()

    def test_skipped_files_not_counted(self, input_dir: Path, output_dir: Path):
        """不支持的扩展名既不算成功也不算失败"""
        (input_dir / "notes.txt").write_text("x")
        (input_dir / "data.json").write_text("{}")
        make_image(input_dir / "pic.bmp")
        config = create_config(input_dir=input_dir, output_dir=output_dir)

        outcomes = process_all_images(config)

        assert len(outcomes) == 1
        assert sorted(p.name for p in output_dir.iterdir()) == ["pic.webp"]

    def test_outputs_match_inputs(self, input_dir: Path, output_dir: Path):
        names = ["one.png", "two.gif", "three.tiff", "four.jpeg"]
        for name in names:
            make_image(input_dir / name, (30, 20))
        make_svg(input_dir / "five.svg")
        config = create_config(input_dir=input_dir, output_dir=output_dir)

        outcomes = process_all_images(config)

        successful = [o for o in outcomes if o.success]
        assert len(successful) == 5
        assert sorted(p.name for p in output_dir.iterdir()) == sorted(
            f"{Path(n).stem}.webp" for n in [*names, "five.svg"]
        )

    def test_idempotent(self, input_dir: Path, output_dir: Path):
        """相同输入和配置重复运行，输出逐字节相同"""
        make_image(input_dir / "photo.png", (300, 200))
        make_image(input_dir / "nested" / "shot.jpg", (200, 300))
        config = create_config(input_dir=input_dir, output_dir=output_dir)

        first = process_all_images(config)
        first_bytes = {p.name: p.read_bytes() for p in output_dir.iterdir()}
        second = process_all_images(config)
        second_bytes = {p.name: p.read_bytes() for p in output_dir.iterdir()}

        assert first_bytes == second_bytes
        assert [o.success for o in first] == [o.success for o in second]

    def test_flat_output_collision(
        self, input_dir: Path, output_dir: Path, caplog: pytest.LogCaptureFixture
    ):
        """不同子目录的同名文件写到同一输出路径，后写入者生效并记录警告"""
        make_image(input_dir / "a" / "pic.png", (10, 10))
        make_image(input_dir / "b" / "pic.png", (20, 20))
        config = create_config(input_dir=input_dir, output_dir=output_dir)

        with caplog.at_level(logging.WARNING):
            outcomes = process_all_images(config)

        assert len(outcomes) == 2
        assert any("冲突" in r.getMessage() for r in caplog.records)
        with Image.open(output_dir / "pic.webp") as img:
            assert img.size == (20, 20)

    def test_nested_output_dir_excluded(self, input_dir: Path):
        """输出目录位于输入目录内部时不重复处理"""
        make_image(input_dir / "pic.png")
        output_dir = input_dir / "optimized"
        make_image(output_dir / "leftover.png")
        config = create_config(input_dir=input_dir, output_dir=output_dir)

        outcomes = process_all_images(config)

        assert [o.input_path.name for o in outcomes] == ["pic.png"]


class TestBatchSummary:
    """汇总测试"""

    def test_counts(self, input_dir: Path, output_dir: Path):
        make_image(input_dir / "ok.png")
        (input_dir / "bad.png").write_bytes(b"x")
        config = create_config(input_dir=input_dir, output_dir=output_dir)

        summary = summarize(process_all_images(config), output_dir)

        assert summary.get_total_count() == 2
        assert summary.get_success_rate() == 50.0
        data = summary.to_dict()
        assert data["successful_files"] == 1
        assert data["failed_files"] == 1
        assert str(output_dir) in summary.get_summary()

    def test_empty_summary(self, output_dir: Path):
        summary = summarize([], output_dir)

        assert summary.get_total_count() == 0
        assert summary.get_success_rate() == 0.0
