import pytest

from catalog_sync.runner import run, run_sync
from catalog_sync.settings import Settings

from conftest import read_json, write_json


@pytest.mark.asyncio
async def test_new_locale_is_created_with_default_paths(source_catalog, i18n_dir, reporter):
    result = await run(Settings(LOCALES=["fr"]), reporter)

    assert result.success
    assert read_json(i18n_dir / "messages.fr.json") == {"locale": "fr", "translations": {"a": "A", "b": "B"}}
    assert reporter.notices[-1] == "[Run] Done!"


@pytest.mark.asyncio
async def test_existing_locale_gets_missing_keys(make_settings, i18n_dir, reporter):
    write_json(i18n_dir / "messages.json", {"locale": "en", "translations": {"a": "A", "b": "B", "c": "C"}})
    path = write_json(i18n_dir / "messages.fr.json", {"locale": "fr", "translations": {"a": "A-old", "b": "B-old"}})

    result = await run(make_settings(LOCALES=["fr"]), reporter)

    assert result.success
    assert result.reports[0].added == ["c"]
    assert read_json(path)["translations"] == {"a": "A-old", "b": "B-old", "c": "C"}


@pytest.mark.asyncio
async def test_empty_locale_list_fails_without_writing(make_settings, source_catalog, tmp_path, reporter):
    destination = tmp_path / "out"

    result = await run(make_settings(LOCALES=[], DESTINATION=str(destination)), reporter)

    assert not result.success
    assert result.error == "No locales specified"
    assert not destination.exists()


@pytest.mark.asyncio
async def test_invalid_destination_json_only_skips_that_locale(make_settings, source_catalog, i18n_dir, reporter):
    (i18n_dir / "messages.fr.json").write_text("{{{", encoding="utf-8")

    result = await run(make_settings(LOCALES=["fr", "de"]), reporter)

    assert result.success
    assert (i18n_dir / "messages.fr.json").read_text(encoding="utf-8") == "{{{"
    assert read_json(i18n_dir / "messages.de.json")["locale"] == "de"
    assert len(reporter.errors) == 1


@pytest.mark.asyncio
async def test_destination_directory_is_created(make_settings, source_catalog, tmp_path, reporter):
    destination = tmp_path / "build" / "i18n"

    result = await run(make_settings(LOCALES=["it"], DESTINATION=str(destination)), reporter)

    assert result.success
    assert (destination / "messages.it.json").exists()


@pytest.mark.asyncio
async def test_custom_source_file_sets_the_output_stem(make_settings, i18n_dir, reporter):
    write_json(i18n_dir / "app.json", {"locale": "en", "translations": {"k": "v"}})

    result = await run(make_settings(SOURCE_FILE="app.json", LOCALES=["es"], INDENT=2), reporter)

    assert result.success
    assert (i18n_dir / "app.es.json").read_text(encoding="utf-8").startswith('{\n  "locale": "es"')


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "setup, message",
    [
        ("missing_source", "doesn't exist or isn't a folder"),
        ("missing_file", "Source file"),
        ("destination_is_file", "isn't a folder"),
        ("bad_json", "Failed to read JSON"),
        ("no_locale", "No locale found"),
        ("no_translations", "No translations found"),
    ],
)
async def test_validation_failures(setup, message, make_settings, i18n_dir, tmp_path, reporter):
    kwargs = {"LOCALES": ["fr"]}
    source_file = i18n_dir / "messages.json"
    if setup == "missing_source":
        kwargs["SOURCE"] = str(tmp_path / "nowhere")
    elif setup == "destination_is_file":
        write_json(source_file, {"locale": "en", "translations": {}})
        (tmp_path / "taken").write_text("", encoding="utf-8")
        kwargs["DESTINATION"] = str(tmp_path / "taken")
    elif setup == "bad_json":
        source_file.write_text("not json", encoding="utf-8")
    elif setup == "no_locale":
        write_json(source_file, {"translations": {}})
    elif setup == "no_translations":
        write_json(source_file, {"locale": "en"})

    result = await run(make_settings(**kwargs), reporter)

    assert not result.success
    assert message in result.error
    assert not (i18n_dir / "messages.fr.json").exists()


@pytest.mark.asyncio
async def test_io_fault_fails_the_run(make_settings, source_catalog, reporter, monkeypatch):
    import catalog_sync.reconciler as module

    async def broken_save(path, catalog, indent="\t"):
        raise OSError("disk full")

    monkeypatch.setattr(module, "save_catalog_async", broken_save)

    result = await run(make_settings(LOCALES=["fr"]), reporter)

    assert not result.success
    assert result.error == "disk full"
    assert "[Run] Failed to convert files." in reporter.errors


@pytest.mark.asyncio
async def test_check_mode_fails_for_stale_catalogs(make_settings, source_catalog, i18n_dir, reporter):
    write_json(i18n_dir / "messages.fr.json", {"locale": "fr", "translations": {"a": "A"}})

    result = await run(make_settings(LOCALES=["fr"], CHECK=True), reporter)

    assert not result.success
    assert "fr" in result.error


def test_run_sync(make_settings, source_catalog, i18n_dir, reporter):
    result = run_sync(make_settings(LOCALES=["pt-BR"]), reporter)

    assert result.success
    assert (i18n_dir / "messages.pt-BR.json").exists()


@pytest.mark.asyncio
async def test_source_with_null_locale_is_accepted(make_settings, i18n_dir, reporter):
    write_json(i18n_dir / "messages.json", {"locale": None, "translations": {"a": "A"}})

    result = await run(make_settings(LOCALES=["fr"]), reporter)

    assert result.success
    assert read_json(i18n_dir / "messages.fr.json") == {"locale": "fr", "translations": {"a": "A"}}
