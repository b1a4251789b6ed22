"""
/**
 * @file llm_translator/tests/test_settings_merge.py
 * @description 配置合并单元测试。
 */
"""

import json
import os
import tempfile
import unittest

from llm_translator.config.settings import Settings, reload_settings


class TestSettingsMerge(unittest.TestCase):
    def tearDown(self):
        # restore the process-wide settings from the real config paths
        reload_settings()

    def test_merge_base_and_local(self):
        with tempfile.TemporaryDirectory() as tmp:
            base_path = os.path.join(tmp, "config.json")
            local_path = os.path.join(tmp, "config.local.json")
            example_path = os.path.join(tmp, "config.example.json")

            with open(base_path, "w") as f:
                json.dump({"llm": {"provider": "vllm", "custom": {"model_name": "m1", "api_key": "a"}}}, f)
            with open(local_path, "w") as f:
                json.dump({"llm": {"custom": {"api_key": "b"}}}, f)
            with open(example_path, "w") as f:
                json.dump({}, f)

            s = reload_settings(base_path=base_path, local_path=local_path, example_path=example_path)
            self.assertEqual(s.custom.get("api_key"), "b")
            self.assertEqual(s.custom.get("model_name"), "m1")
            self.assertEqual(s.resolve_provider(environ={}), "vllm")

    def test_example_used_when_base_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            example_path = os.path.join(tmp, "config.example.json")
            with open(example_path, "w") as f:
                json.dump({"llm": {"provider": "lmstudio"}}, f)

            s = reload_settings(
                base_path=os.path.join(tmp, "config.json"),
                local_path=os.path.join(tmp, "config.local.json"),
                example_path=example_path,
            )
            self.assertEqual(s.resolve_provider(environ={}), "lmstudio")

    def test_invalid_json_falls_back_to_empty(self):
        with tempfile.TemporaryDirectory() as tmp:
            base_path = os.path.join(tmp, "config.json")
            with open(base_path, "w") as f:
                f.write("{not json")

            s = reload_settings(
                base_path=base_path,
                local_path=os.path.join(tmp, "config.local.json"),
                example_path=os.path.join(tmp, "config.example.json"),
            )
            self.assertEqual(s.raw, {})

    def test_environment_overrides_file(self):
        s = Settings(raw={"llm": {"provider": "vllm", "custom": {"base_url": "http://file:1/v1"}}})
        env = {"LLM_PROVIDER": "webui", "LLM_API_BASE_URL": "http://env:2/v1"}

        self.assertEqual(s.resolve_provider(environ=env), "webui")
        self.assertEqual(s.resolve_custom("base_url", "LLM_API_BASE_URL", environ=env), "http://env:2/v1")
        self.assertEqual(s.resolve_custom("base_url", "LLM_API_BASE_URL", environ={}), "http://file:1/v1")
        self.assertIsNone(s.resolve_custom("model_name", "LLM_MODEL_NAME", environ={}))

    def test_default_paths_read_packaged_example(self):
        s = reload_settings()
        self.assertEqual(s.resolve_provider(environ={}), "ollama")

    def test_numeric_file_values_become_strings(self):
        s = Settings(raw={"llm": {"custom": {"max_tokens": 512}}})
        self.assertEqual(s.resolve_custom("max_tokens", "LLM_MAX_TOKENS", environ={}), "512")


if __name__ == "__main__":
    unittest.main()
