"""Unit tests for CodeGenerator."""

import re

from gatehouse.domain.service import CodeGenerator

URL_SAFE = re.compile(r"^[A-Za-z0-9_-]+$")


class TestCodeGenerator:
    """Tests for CodeGenerator."""

    def test_default_length_is_fixed(self):
        generator = CodeGenerator()

        lengths = {len(generator.generate().root) for _ in range(50)}

        assert lengths == {16}

    def test_codes_are_url_safe(self):
        generator = CodeGenerator(num_bytes=24)

        for _ in range(50):
            code = generator.generate().root
            assert URL_SAFE.match(code)
            assert len(code) == 32

    def test_codes_do_not_repeat(self):
        generator = CodeGenerator()

        codes = {generator.generate().root for _ in range(1000)}

        assert len(codes) == 1000
