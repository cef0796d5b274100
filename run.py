from cobranca_pix import create_api
import os


def main():
    app = create_api()
    porta = int(os.environ.get('PIX_API_PORTA', '5005'))
    app.run(debug=False, port=porta, use_reloader=False)


if __name__ == '__main__':
    main()
