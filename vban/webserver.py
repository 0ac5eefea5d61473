from sanic import Sanic
from sanic.response import json, text
import json as _json
from vban.client import LedgerClient
from vban.exceptions import VbanError
from vban import config

app = Sanic('vban')

client = LedgerClient(signer=config.SIGNER).new(config.TOTAL_SUPPLY)


# The stdlib encoder keeps 128 bit integers exact
def _response(body, status=200):
    return json(body, status=status, dumps=_json.dumps)


def _parse_value(value):
    if isinstance(value, str) and value.isdecimal():
        return int(value)
    return value


@app.route("/", methods=["GET",])
async def index(request):
    return text("I\'m a teapot", status=418)


@app.route('/supply', methods=['GET'])
async def get_supply(request):
    try:
        return _response({'total_supply': client.total_supply()})
    except VbanError as e:
        return _response({'error': str(e)}, status=404)


@app.route('/balances/<account>', methods=['GET'])
async def get_balance(request, account):
    try:
        balance = client.balance_of(account)
    except VbanError as e:
        return _response({'error': str(e)}, status=404)
    except AssertionError as e:
        return _response({'error': str(e)}, status=400)

    return _response({'account': account, 'balance': balance})


@app.route('/holders', methods=['GET'])
async def get_holders(request):
    return _response({'holders': client.holders()})


# Expects json object such that:
'''
{
    'sender': 'string',
    'to': 'string',
    'value': int
}
'''
@app.route('/transfer', methods=['POST'])
async def transfer(request):
    payload = request.json or {}

    sender = payload.get('sender')
    to = payload.get('to')
    value = _parse_value(payload.get('value'))

    if not isinstance(sender, str) or not sender or to is None or value is None:
        return _response({'error': 'malformed payload'}, status=400)

    try:
        client.transfer(to=to, value=value, signer=sender)
    except (VbanError, AssertionError) as e:
        return _response({'error': str(e)}, status=400)

    return _response({'success': True})


def start_webserver():
    app.run(host='0.0.0.0', port=config.WEB_SERVER_PORT, workers=config.NUM_WORKERS, debug=False, access_log=False)


if __name__ == '__main__':
    start_webserver()
