from fastapi.testclient import TestClient
from bookstore.main import app

client = TestClient(app)


def _create(title='Dune', author='Frank Herbert', price=9.99):
    r = client.post('/books', json={'title': title, 'author': author, 'price': price})
    assert r.status_code == 200
    return r.json()


def test_create_then_list_contains_book():
    r = client.post('/books', json={'title': 'Harry Potter', 'author': 'JK Rowling', 'price': 20.5})
    assert r.status_code == 200
    created = r.json()
    assert isinstance(created['id'], int)
    assert created['title'] == 'Harry Potter'
    listed = client.get('/books')
    assert listed.status_code == 200
    match = next((b for b in listed.json() if b['id'] == created['id']), None)
    assert match == {'id': created['id'], 'title': 'Harry Potter', 'author': 'JK Rowling', 'price': 20.5}


def test_unknown_id_returns_plain_text_404():
    r = client.get('/books/999')
    assert r.status_code == 404
    assert r.headers['content-type'].startswith('text/plain')
    assert r.text == 'Book not found with id 999'


def test_get_book_by_id():
    book = _create()
    r = client.get(f"/books/{book['id']}")
    assert r.status_code == 200
    assert r.json()['author'] == 'Frank Herbert'


def test_ids_are_unique():
    a = _create(title='A')
    b = _create(title='B')
    assert a['id'] != b['id']


def test_create_rejects_invalid_payloads():
    assert client.post('/books', json={'title': 'X', 'author': 'Y', 'price': -1}).status_code == 422
    assert client.post('/books', json={'title': '   ', 'author': 'Y', 'price': 1}).status_code == 422
    assert client.post('/books', json={'author': 'Y', 'price': 1}).status_code == 422


def test_create_strips_whitespace():
    book = _create(title='  Emma  ', author=' Jane Austen ')
    assert book['title'] == 'Emma'
    assert book['author'] == 'Jane Austen'


def test_update_replaces_fields():
    book = _create()
    r = client.put(f"/books/{book['id']}", json={'title': 'Dune Messiah', 'author': 'Frank Herbert', 'price': 12.0})
    assert r.status_code == 200
    assert r.json() == {'id': book['id'], 'title': 'Dune Messiah', 'author': 'Frank Herbert', 'price': 12.0}
    assert client.get(f"/books/{book['id']}").json()['title'] == 'Dune Messiah'


def test_update_unknown_id_is_404():
    r = client.put('/books/999999', json={'title': 'T', 'author': 'A', 'price': 1})
    assert r.status_code == 404


def test_delete_removes_book():
    book = _create()
    r = client.delete(f"/books/{book['id']}")
    assert r.status_code == 204
    assert client.get(f"/books/{book['id']}").status_code == 404
    assert all(b['id'] != book['id'] for b in client.get('/books').json())
    assert client.delete(f"/books/{book['id']}").status_code == 404


def test_request_id_header_exists():
    r = client.get('/health')
    assert r.status_code == 200
    assert r.json() == {'status': 'ok'}
    assert 'X-Request-ID' in r.headers


def test_request_id_is_echoed():
    r = client.get('/books', headers={'X-Request-ID': 'abc123'})
    assert r.headers['X-Request-ID'] == 'abc123'


def test_non_finite_price_rejected():
    # sent as raw text so the JSON literals reach the server unchanged
    for literal in ('Infinity', '-Infinity', 'NaN'):
        body = '{"title": "a", "author": "b", "price": %s}' % literal
        r = client.post('/books', content=body, headers={'Content-Type': 'application/json'})
        assert r.status_code == 422, literal
