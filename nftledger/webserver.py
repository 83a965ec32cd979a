from sanic import Sanic
from sanic.response import json, text
from sanic_cors import CORS
import json as _json
from functools import partial
from nftledger.client import LedgerClient
from nftledger.db.encoder import encode
from nftledger.exceptions import LedgerError, NotFound, Unauthorized
from nftledger.logger import get_logger
from nftledger import config

log = get_logger('Webserver')

# Token ids and balances are 256-bit; the stdlib encoder keeps them exact
dumps = partial(_json.dumps, separators=(',', ':'))


def respond(body, status=200):
    return json(body, status=status, dumps=dumps)


def status_for(e):
    if isinstance(e, NotFound):
        return 404
    if isinstance(e, Unauthorized):
        return 403
    if isinstance(e, LedgerError):
        return 400
    return 500


def error(e):
    return respond({'error': str(e), 'type': type(e).__name__}, status=status_for(e))


def parse_token_id(token_id: str):
    try:
        return int(token_id)
    except ValueError:
        return token_id


def create_app(client=None, name='nftledger'):
    app = Sanic(name)
    CORS(app, automatic_options=True)

    app.ctx.client = client or LedgerClient()

    def read(function, signer=None, **kwargs):
        return app.ctx.client.call(function, signer=signer, **kwargs)

    @app.route('/', methods=['GET'])
    async def teapot(request):
        return text('I\'m a teapot', status=418)

    @app.route('/metadata', methods=['GET'])
    async def get_metadata(request):
        return respond({'name': read('get_name'), 'symbol': read('get_symbol')})

    @app.route('/tokens/<token_id>', methods=['GET'])
    async def get_token(request, token_id):
        token_id = parse_token_id(token_id)
        try:
            return respond(app.ctx.client.read_token(token_id))
        except LedgerError as e:
            return error(e)

    @app.route('/balances/<account>', methods=['GET'])
    async def get_balance(request, account):
        try:
            return respond({'account': account, 'balance': read('balance_of', account=account)})
        except LedgerError as e:
            return error(e)

    @app.route('/operators/<owner>/<operator>', methods=['GET'])
    async def get_operator(request, owner, operator):
        approved = read('is_approved_for_all', owner=owner, operator=operator)
        return respond({'owner': owner, 'operator': operator, 'approved': approved})

    @app.route('/contracts/<contract>/<variable>', methods=['GET'])
    async def get_variable(request, contract, variable):
        key = request.args.get('key')

        driver = app.ctx.client.raw_driver
        if key is None:
            response = driver.get_var(contract, variable)
        else:
            response = driver.get_var(contract, variable, key.split(','))

        if response is None:
            return respond({'value': None}, status=404)
        return respond({'value': encode(response)}, status=200)

    # Expects json object such that:
    '''
    {
        'sender': 'string',
        'function': 'string',
        'kwargs': {}
    }
    '''
    @app.route('/call', methods=['POST'])
    async def call(request):
        payload = request.json or {}

        sender = payload.get('sender')
        function = payload.get('function')
        kwargs = payload.get('kwargs') or {}

        if sender is None or function is None or not isinstance(kwargs, dict):
            return respond({'error': 'malformed payload'}, status=400)

        output = app.ctx.client.executor.execute(sender=sender, function_name=function, kwargs=kwargs)

        if output['status_code'] == 1:
            e = output['result']
            return respond({'status_code': 1, 'error': str(e), 'type': type(e).__name__, 'events': []},
                         status=status_for(e))

        return respond({'status_code': 0, 'result': output['result'], 'events': output['events']})

    return app


def start_webserver(app=None, ssl=None):
    app = app or create_app()
    log.info('Serving ledger on {}:{}'.format(config.WEB_SERVER_HOST, config.WEB_SERVER_PORT))
    app.run(host=config.WEB_SERVER_HOST, port=config.WEB_SERVER_PORT, workers=config.NUM_WORKERS,
            debug=False, access_log=False, ssl=ssl)


if __name__ == '__main__':
    start_webserver()
