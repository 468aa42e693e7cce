"""
Pytest configuration for resume-pdf
"""

import logging
import re
import sys
from dataclasses import dataclass
from typing import List

import pytest


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler leaks between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for tests."""
    return tmp_path


@pytest.fixture
def scenario_record():
    """Minimal résumé: one header and a single experience entry."""
    return {
        "basics": {"name": "张三", "headline": "产品经理"},
        "experience": [
            {"org": "Acme", "role": "PM", "start": "2021", "end": "2023", "summary": ["Did X"]}
        ],
    }


@pytest.fixture
def full_record():
    """Résumé touching every section, with a few placeholders mixed in."""
    return {
        "basics": {
            "name": "李雷",
            "headline": "数据工程师",
            "location": "上海",
            "email": "lilei@example.com",
            "phone": "TODO: phone",
            "links": [
                {"label": "GitHub", "url": "https://github.com/lilei"},
                {"label": "Blog", "url": "TODO"},
                {"url": "https://lilei.dev"},
            ],
        },
        "highlights": ["十年数据平台经验", "  ", None, "TODO 补充亮点"],
        "experience": [
            {
                "title": "高级数据工程师",
                "start": "2019",
                "location": "上海",
                "summary": ["负责实时数仓建设"],
                "achievements": ["延迟从 10 分钟降到 30 秒", "TODO"],
            },
            {"org": "TODO", "role": "", "summary": []},
        ],
        "projects": [
            {
                "name": "流式风控",
                "context": "交易量激增",
                "actions": ["设计 Flink 作业", "搭建告警"],
                "result": "拦截率提升 20%",
                "evidence": [{"label": "Demo", "url": "https://example.com/demo"}, {"label": "x"}],
                "reflection": "先做监控",
            }
        ],
        "skills": [{"group": "语言", "items": ["Python", "SQL", "TODO"]}, {"group": "TODO", "items": []}],
        "education": [{"school": "复旦大学", "degree": "硕士", "major": "计算机", "start": "2012", "end": "2015"}],
        "certifications": ["AWS SAA", "TODO"],
    }


@dataclass
class XrefInfo:
    offsets: List[int]
    size: int
    root: int
    startxref: int


def parse_xref(data: bytes) -> XrefInfo:
    """Read the classic xref table and trailer of a PDF byte string."""
    tail = data.rsplit(b"startxref\n", 1)[1]
    startxref = int(tail.split(b"\n", 1)[0])
    assert data[startxref:startxref + 5] == b"xref\n"

    lines = data[startxref:].split(b"\n")
    first, count = (int(part) for part in lines[1].split())
    assert first == 0
    entries = lines[2:2 + count]
    assert entries[0] == b"0000000000 65535 f "

    offsets = []
    for entry in entries[1:]:
        assert re.fullmatch(rb"\d{10} \d{5} n ", entry), entry
        offsets.append(int(entry[:10]))

    trailer = data[data.index(b"trailer\n", startxref):]
    size = int(re.search(rb"/Size (\d+)", trailer).group(1))
    root = int(re.search(rb"/Root (\d+) 0 R", trailer).group(1))
    return XrefInfo(offsets=offsets, size=size, root=root, startxref=startxref)


def assert_structurally_valid(data: bytes) -> XrefInfo:
    """Every xref offset must point at its own ``n 0 obj`` marker."""
    assert data.startswith(b"%PDF-1.4\n")
    assert data.endswith(b"%%EOF\n")
    info = parse_xref(data)
    assert info.size == len(info.offsets) + 1
    for obj_num, offset in enumerate(info.offsets, start=1):
        marker = f"{obj_num} 0 obj\n".encode("ascii")
        assert data[offset:offset + len(marker)] == marker, f"bad offset for object {obj_num}"
    return info


@pytest.fixture
def pdf_structure():
    """Structural validator for PDF bytes (returns the parsed xref info)."""
    return assert_structurally_valid


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    # Ignore logging errors during tests
    logging.raiseExceptions = False
