import pytest

from xls_wrapper import Document, Workbook


def pytest_addoption(parser):
    parser.addoption("--save-file", action="store", default=None)


@pytest.fixture(name="configurable_save_file")
def configurable_save_file_fixture(tmp_path, pytestconfig):
    if pytestconfig.getoption("save_file") is not None:
        new_filename = pytestconfig.getoption("save_file")
    else:
        new_filename = tmp_path / "test-save-new.xls"

    yield new_filename


@pytest.fixture(name="doc")
def doc_fixture():
    return Document()


@pytest.fixture(name="workbook")
def workbook_fixture(tmp_path):
    workbook = Workbook()
    workbook.create(tmp_path / "test-workbook.xls")
    return workbook
