from app import create_app
from app.logging import get_logger

app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    get_logger("run").info("Servidor escuchando en http://localhost:%s", port)
    app.run(host=app.config['HOST'], port=port)
