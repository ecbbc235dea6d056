"""Entry point for `python -m wordfall` or the `wordfall` console script."""

import argparse
import logging

from wordfall.app import App


def main() -> None:
    parser = argparse.ArgumentParser(description="WordFall — typing rhythm game")
    parser.add_argument("--songs-dir", default="", help="Directory containing song sheets (JSON/MIDI/MusicXML)")
    parser.add_argument("--words", default="", help="JSON file with the word list")
    parser.add_argument("--song", default="", help="Title of the song to start with")
    parser.add_argument("--soundfont", default="", help="SoundFont (.sf2) used for notes and cues")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    app = App(songs_dir=args.songs_dir, words_path=args.words, song_title=args.song, soundfont=args.soundfont)
    app.run()


if __name__ == "__main__":
    main()
