"""
Employee contact registry (`kontak_pegawai`): create and list contacts.
"""
