import pytest
import requests
import responses

from mediascrap.download import MAX_RETRIES, DownloadError, download_file

URL = "https://1500chan.org/b/src/1.mp4"


def test_download_writes_body_and_sends_cookie(tmp_path):
    target = tmp_path / "1.mp4"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"video-bytes")
        download_file(URL, str(target), initial_delay=0)
        assert rsps.calls[0].request.headers["Cookie"] == "mc=1"
    assert target.read_bytes() == b"video-bytes"


def test_download_uses_given_session(tmp_path):
    target = tmp_path / "1.mp4"
    with responses.RequestsMock() as rsps, requests.Session() as session:
        rsps.add(responses.GET, URL, body=b"abc")
        download_file(URL, str(target), session, 0)
    assert target.read_bytes() == b"abc"


def test_download_retries_after_connection_error(tmp_path):
    target = tmp_path / "1.mp4"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=requests.ConnectionError("refused"))
        rsps.add(responses.GET, URL, body=b"second")
        download_file(URL, str(target), initial_delay=0)
        assert len(rsps.calls) == 2
    assert target.read_bytes() == b"second"


def test_download_gives_up_after_retries(tmp_path):
    target = tmp_path / "1.mp4"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=requests.ConnectionError("refused"))
        with pytest.raises(DownloadError, match="failed to download"):
            download_file(URL, str(target), initial_delay=0)
        assert len(rsps.calls) == MAX_RETRIES + 1
    assert not target.exists()


def test_download_saves_error_status_body(tmp_path):
    target = tmp_path / "1.mp4"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"missing", status=404)
        download_file(URL, str(target), initial_delay=0)
    assert target.read_bytes() == b"missing"


def test_download_cannot_create_file(tmp_path):
    target = tmp_path / "no_such_dir" / "1.mp4"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"data")
        with pytest.raises(DownloadError, match="error creating file"):
            download_file(URL, str(target), initial_delay=0)