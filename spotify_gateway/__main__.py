from spotify_gateway.server import run

run()
