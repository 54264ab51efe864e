from davfile.lib import joinpath


def test_uri_join():
    assert joinpath.uri_join('/test', '/file') == '/test/file'
    assert joinpath.uri_join('/test', 'file/') == '/test/file/'
    assert joinpath.uri_join('/test', '/file/') == '/test/file/'
    assert joinpath.uri_join('/test', 'file') == '/test/file'
    assert joinpath.uri_join('/test/', 'file') == '/test/file'
    assert joinpath.uri_join('/test', '/dir/', '/file/') == '/test/dir/file/'
    assert joinpath.uri_join('/test') == '/test'


def test_join_url():
    for base in ('http://host/dav', 'http://host/dav/', 'http://host/dav//'):
        for path in ('a/b.txt', '/a/b.txt', '//a/b.txt'):
            assert joinpath.join_url(base, path) == 'http://host/dav/a/b.txt'
    assert joinpath.join_url('http://host', '/a') == 'http://host/a'
    assert joinpath.join_url('http://host/dav', 'a/') == 'http://host/dav/a/'
