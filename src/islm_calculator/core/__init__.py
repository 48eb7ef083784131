"""IS-LMモデルの計算コア"""
