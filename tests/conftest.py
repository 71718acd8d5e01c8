import pytest

from rimfetch.config import Config

HARMONY_URL = "https://steamcommunity.com/sharedfiles/filedetails/?id=2009463077"
HUGSLIB_URL = "https://steamcommunity.com/sharedfiles/filedetails/?id=818773962"

MODS_TXT = f"""{HARMONY_URL} Harmony
https://steamcommunity.com/sharedfiles/filedetails/?searchtext=broken No Id Here

{HUGSLIB_URL} HugsLib
"""


def stage_mod(steam_path, workshop_id, name="Test Mod"):
    about = steam_path / str(workshop_id) / "About"
    about.mkdir(parents=True, exist_ok=True)
    (about / "About.xml").write_text(
        f"<ModMetaData><name>{name}</name></ModMetaData>", encoding="utf-8"
    )
    (about / "PublishedFileId.txt").write_text(str(workshop_id), encoding="utf-8")
    return steam_path / str(workshop_id)


@pytest.fixture
def mods_path(tmp_path):
    path = tmp_path / "Mods"
    path.mkdir()
    (path / "mods.txt").write_text(MODS_TXT, encoding="utf-8")
    return path


@pytest.fixture
def steam_path(tmp_path):
    path = tmp_path / "steamapps" / "workshop" / "content" / "294100"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def config(mods_path, steam_path):
    return Config(mods_path=mods_path, steam_path=steam_path)


@pytest.fixture
def fake_steamcmd(monkeypatch, steam_path):
    """Replaces the SteamCMD subprocess.

    Staged items are created for every requested id except those added to
    ``fail`` (non-zero exit) or ``error`` (SteamCMD error line, exit 0).
    """

    class FakeSteamCmd:
        def __init__(self):
            self.calls = []
            self.fail = set()
            self.error = set()

        def execute(self, cmd):
            import subprocess

            self.calls.append(cmd)
            workshop_id = int(cmd[cmd.index("+workshop_download_item") + 2])
            yield "Waiting for user info...OK\n"
            if workshop_id in self.fail:
                raise subprocess.CalledProcessError(8, cmd)
            if workshop_id in self.error:
                yield f"ERROR! Download item {workshop_id} failed (Failure).\n"
                return
            stage_mod(steam_path, workshop_id)
            yield f'Success. Downloaded item {workshop_id} to "{steam_path / str(workshop_id)}"\n'

    fake = FakeSteamCmd()
    monkeypatch.setattr("rimfetch.util.execute", fake.execute)
    return fake
