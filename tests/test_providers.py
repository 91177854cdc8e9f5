# tests/test_providers.py
import pytest

from civracontext import ContextRequest, ConversationMessage
from civracontext.providers.core_files import CORE_FILES, CoreFilesProvider
from civracontext.providers.file_references import FileReferencesProvider, extract_file_references
from civracontext.providers.history import HistoryFilesProvider, get_files_from_history
from civracontext.providers.keywords import KeywordFilesProvider, infer_relevant_files


def assistant(content: str) -> ConversationMessage:
    return ConversationMessage(role="assistant", content=content)


def user(content: str) -> ConversationMessage:
    return ConversationMessage(role="user", content=content)


# --- core files ---

def test_core_files_provider_returns_constant_list():
    provider = CoreFilesProvider()
    assert provider.provide(ContextRequest(message="anything")) == list(CORE_FILES)
    assert "package.json" in CORE_FILES
    assert "app/globals.css" in CORE_FILES


def test_core_files_provider_custom_list():
    provider = CoreFilesProvider(["pyproject.toml"])
    assert provider.provide(ContextRequest(message="")) == ["pyproject.toml"]


# --- explicit references ---

@pytest.mark.parametrize("message, expected", [
    ("please update app/page.tsx", ["app/page.tsx"]),
    ("look at src/components/Button.jsx and lib/utils.ts", ["src/components/Button.jsx", "lib/utils.ts"]),
    ('edit "hooks/useAuth.ts" now', ["hooks/useAuth.ts"]),
    ("edit `middleware.ts` now", ["middleware.ts"]),
    ("the README.md and docs/guide.md", []),
    ("nothing here", []),
])
def test_extract_file_references(message, expected):
    assert extract_file_references(message) == expected


def test_references_bare_matches_come_before_quoted():
    message = 'see "hooks/a.ts" and app/b.tsx'
    assert extract_file_references(message) == ["app/b.tsx", "hooks/a.ts"]


def test_references_are_deduplicated_across_families():
    message = 'app/page.tsx, "app/page.tsx" and `app/page.tsx`'
    assert extract_file_references(message) == ["app/page.tsx"]


def test_references_require_known_root_for_bare_paths():
    assert extract_file_references("hooks/useAuth.ts") == []


def test_file_references_provider_skips_empty_message():
    provider = FileReferencesProvider()
    assert not provider.can_provide(ContextRequest(message=""))
    assert provider.provide(ContextRequest(message="app/x.ts")) == ["app/x.ts"]


# --- history ---

def test_history_collects_writes_search_replace_and_renames():
    history = [
        assistant(
            '<dec-code><dec-rename original_file_path="old.tsx" new_file_path="new.tsx" />'
            '<dec-write file_path="app/page.tsx">x</dec-write>'
            '<dec-search-replace file_path="app/layout.tsx">...</dec-search-replace></dec-code>'
        ),
    ]
    assert get_files_from_history(history) == ["app/page.tsx", "app/layout.tsx", "new.tsx"]


def test_history_rename_reports_new_path_only():
    history = [assistant('<dec-rename original_file_path="old.tsx" new_file_path="new.tsx" />')]
    files = get_files_from_history(history)
    assert "new.tsx" in files
    assert "old.tsx" not in files


def test_history_ignores_non_assistant_messages():
    history = [
        user('<dec-write file_path="from-user.tsx">x</dec-write>'),
        ConversationMessage(role="system", content='<dec-write file_path="from-system.tsx">x</dec-write>'),
        assistant(""),
    ]
    assert get_files_from_history(history) == []


def test_history_only_scans_last_n_messages():
    history = [assistant(f'<dec-write file_path="f{i}.tsx">x</dec-write>') for i in range(7)]
    assert get_files_from_history(history) == [f"f{i}.tsx" for i in range(2, 7)]
    assert get_files_from_history(history, last_n=2) == ["f5.tsx", "f6.tsx"]
    assert get_files_from_history(history, last_n=0) == []


def test_history_deduplicates_paths():
    history = [
        assistant('<dec-write file_path="a.tsx">1</dec-write>'),
        assistant('<dec-write file_path="a.tsx">2</dec-write>'),
    ]
    assert get_files_from_history(history) == ["a.tsx"]


def test_history_provider_uses_request_window():
    provider = HistoryFilesProvider()
    history = [assistant('<dec-write file_path="a.tsx">1</dec-write>'), user("thanks")]
    assert not provider.can_provide(ContextRequest(message="x"))
    assert provider.provide(ContextRequest(message="x", conversation_history=history, history_window=1)) == []
    assert provider.provide(ContextRequest(message="x", conversation_history=history)) == ["a.tsx"]


# --- keywords ---

@pytest.mark.parametrize("message, expected", [
    ("Make the BUTTON bigger", ["components/ui/button.tsx"]),
    ("add an input", ["components/ui/input.tsx", "components/ui/form.tsx"]),
    ("fix the navbar", ["app/layout.tsx"]),
    ("redo the landing", ["app/page.tsx"]),
    ("new theme please", ["app/globals.css", "tailwind.config.ts"]),
    ("add an api endpoint", []),
])
def test_infer_relevant_files(message, expected):
    assert infer_relevant_files(message) == expected


def test_keyword_rules_fire_independently():
    files = infer_relevant_files("click the header to change the color")
    assert files == [
        "components/ui/button.tsx",
        "app/layout.tsx",
        "app/globals.css",
        "tailwind.config.ts",
    ]


def test_keyword_provider_custom_rules():
    provider = KeywordFilesProvider([(("chart",), ("components/Chart.tsx",))])
    assert provider.provide(ContextRequest(message="A Chart")) == ["components/Chart.tsx"]
    assert provider.provide(ContextRequest(message="a button")) == []
