"""
漢数字変換のコア（辞書・パーサ・フォーマッタ・公開関数）
"""
