from unittest import TestCase
from nftledger.webserver import create_app
from nftledger.client import LedgerClient
from nftledger.db.encoder import decode
from nftledger import config
import itertools

_app_names = itertools.count()


class TestWebserver(TestCase):
    def setUp(self):
        self.client = LedgerClient(name='Punks', symbol='PNK')
        self.app = create_app(self.client, name='nftledger_test_{}'.format(next(_app_names)))

        self.client.mint('stu', 1)

    def tearDown(self):
        self.client.flush()

    def post_call(self, sender, function, /, **kwargs):
        payload = {'sender': sender, 'function': function, 'kwargs': kwargs}
        return self.app.test_client.post('/call', json=payload)

    def test_teapot(self):
        _, response = self.app.test_client.get('/')
        self.assertEqual(response.status, 418)

    def test_metadata(self):
        _, response = self.app.test_client.get('/metadata')

        self.assertEqual(response.status, 200)
        self.assertEqual(response.json, {'name': 'Punks', 'symbol': 'PNK'})

    def test_get_token(self):
        self.client.set_token_uri(1, 'ipfs://one')

        _, response = self.app.test_client.get('/tokens/1')

        self.assertEqual(response.status, 200)
        self.assertEqual(response.json, {'token_id': 1, 'owner': 'stu', 'approved': None, 'uri': 'ipfs://one'})

    def test_get_missing_token(self):
        _, response = self.app.test_client.get('/tokens/2')

        self.assertEqual(response.status, 404)
        self.assertEqual(response.json['type'], 'NotFound')

    def test_get_token_bad_id(self):
        _, response = self.app.test_client.get('/tokens/abc')

        self.assertEqual(response.status, 400)
        self.assertEqual(response.json['type'], 'InvalidTokenId')

    def test_big_token_id_is_exact(self):
        self.client.mint('raghu', config.UINT256_MAX)

        _, response = self.app.test_client.get('/tokens/{}'.format(config.UINT256_MAX))

        self.assertEqual(response.status, 200)
        self.assertEqual(response.json['token_id'], config.UINT256_MAX)

    def test_get_balance(self):
        _, response = self.app.test_client.get('/balances/stu')

        self.assertEqual(response.status, 200)
        self.assertEqual(response.json['balance'], 1)

    def test_get_operator(self):
        self.client.call('set_approval_for_all', signer='stu', operator='colin', approved=True)

        _, response = self.app.test_client.get('/operators/stu/colin')
        self.assertTrue(response.json['approved'])

    def test_get_variable(self):
        _, response = self.app.test_client.get('/contracts/nft/owners?key=1')

        self.assertEqual(response.status, 200)
        self.assertEqual(decode(response.json['value']), 'stu')

    def test_get_missing_variable(self):
        _, response = self.app.test_client.get('/contracts/nft/owners?key=2')

        self.assertEqual(response.status, 404)
        self.assertIsNone(response.json['value'])

    def test_call_transfer(self):
        _, response = self.post_call('stu', 'transfer_from', sender='stu', to='raghu', token_id=1)

        self.assertEqual(response.status, 200)
        self.assertEqual(response.json['status_code'], 0)
        self.assertEqual(response.json['events'],
                         [{'event': 'Transfer', 'sender': 'stu', 'to': 'raghu', 'token_id': 1}])

        self.assertEqual(self.client.call('owner_of', token_id=1), 'raghu')

    def test_call_unauthorized(self):
        _, response = self.post_call('colin', 'transfer_from', sender='stu', to='colin', token_id=1)

        self.assertEqual(response.status, 403)
        self.assertEqual(response.json['type'], 'Unauthorized')
        self.assertEqual(self.client.call('owner_of', token_id=1), 'stu')

    def test_call_private_refused(self):
        _, response = self.post_call('stu', 'mint', to='stu', token_id=2)

        self.assertEqual(response.status, 400)
        self.assertEqual(response.json['type'], 'PrivateMethod')

    def test_call_malformed(self):
        _, response = self.app.test_client.post('/call', json={'function': 'owner_of'})

        self.assertEqual(response.status, 400)
        self.assertEqual(response.json['error'], 'malformed payload')

    def test_get_operator_with_malformed_account(self):
        _, response = self.app.test_client.get('/operators/stu/x:y')

        self.assertEqual(response.status, 200)
        self.assertFalse(response.json['approved'])
