# run.py

from hoshizora import create_app
from config import Config

app = create_app(Config)

if __name__ == '__main__':
    # host='0.0.0.0' accepts connections from other machines on the network
    app.run(host='0.0.0.0', port=5001)
