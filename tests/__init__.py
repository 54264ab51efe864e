from davfile.uploader import WebdavUploader

SERVER = "http://dav.test/dav"
WRITE_SERVER = "http://write.dav.test/dav"


def make_uploader(**kwargs) -> WebdavUploader:
    kwargs.setdefault("webdav_server", SERVER)
    return WebdavUploader(**kwargs)


def sent_requests(requests_mock):
    return [(request.method, request.url) for request in requests_mock.request_history]
